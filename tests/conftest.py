from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

SAMPLE_CASES_MODULE = "enki_sample_cases"

SAMPLE_CASES_SOURCE = textwrap.dedent(
    """
    from enki import TestCase, assert_sequence_equals, assert_true


    class GreenCase(TestCase):
        def __init__(self):
            super().__init__()
            self.register(self.test_equal, "equal lists")
            self.register(self.test_truth, "truth")

        def test_equal(self):
            assert_sequence_equals([1, 2, 3], [1, 2, 3])

        def test_truth(self):
            assert_true(2 > 1)


    class RedCase(TestCase):
        def __init__(self):
            super().__init__()
            self.register(self.test_ok, "still fine")
            self.register(self.test_broken, "broken <case>")

        def test_ok(self):
            pass

        def test_broken(self):
            self.explicit_fail()


    def make_case():
        case = TestCase("factory")
        case.register(lambda: None, "from factory")
        return case


    class BrokenSetupCase(TestCase):
        def __init__(self):
            super().__init__()
            self.register(lambda: None, "never runs")

        def setup(self):
            raise RuntimeError("database unavailable")


    NOT_A_CASE = 42
    """
)


@pytest.fixture
def sample_cases(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable module with sample test cases and return its name."""

    module_dir = tmp_path / "modules"
    module_dir.mkdir()
    (module_dir / f"{SAMPLE_CASES_MODULE}.py").write_text(SAMPLE_CASES_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(module_dir))
    monkeypatch.delitem(sys.modules, SAMPLE_CASES_MODULE, raising=False)
    return SAMPLE_CASES_MODULE

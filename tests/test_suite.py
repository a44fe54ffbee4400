from __future__ import annotations

import textwrap
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from enki.core import TestCase
from enki.reporting import ExportSettings
from enki.suite import Suite, load_suite, load_test_case, run_suite


def _write_suite(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "suite.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_load_suite_resolves_relative_export_paths(tmp_path: Path) -> None:
    path = _write_suite(
        tmp_path,
        """
        cases:
          - pkg.module:Case
        exports:
          - format: xml
            path: reports/results.xml
            durations: true
          - format: text
        """,
    )
    suite = load_suite(path)
    assert suite.cases == ("pkg.module:Case",)
    assert suite.suite_dir == tmp_path.resolve()
    xml_export, text_export = suite.exports
    assert xml_export == ExportSettings(
        format="xml",
        path=str(tmp_path.resolve() / "reports" / "results.xml"),
        durations=True,
    )
    assert text_export == ExportSettings()


@pytest.mark.parametrize(
    "body",
    [
        "exports: []\n",
        "cases: []\n",
        "cases: ['a:B']\nexports:\n  - format: html\n",
        "cases: ['a:B']\nunknown: 1\n",
    ],
)
def test_load_suite_rejects_invalid_files(tmp_path: Path, body: str) -> None:
    with pytest.raises(ValueError, match="Suite schema validation failed"):
        load_suite(_write_suite(tmp_path, body))


def test_load_suite_requires_mapping(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="mapping"):
        load_suite(_write_suite(tmp_path, "- just\n- a list\n"))


def test_load_test_case_accepts_classes_and_factories(sample_cases: str) -> None:
    assert load_test_case(f"{sample_cases}:GreenCase").name == "GreenCase"
    factory_case = load_test_case(f"{sample_cases}.make_case")
    assert isinstance(factory_case, TestCase)
    assert factory_case.name == "factory"


def test_load_test_case_rejects_other_objects(sample_cases: str) -> None:
    with pytest.raises(TypeError, match="did not produce a TestCase"):
        load_test_case(f"{sample_cases}:NOT_A_CASE")
    with pytest.raises(AttributeError):
        load_test_case(f"{sample_cases}:Missing")


def test_run_suite_exports_one_batch_per_case(sample_cases: str, tmp_path: Path) -> None:
    target = tmp_path / "results.xml"
    suite = Suite(
        cases=(f"{sample_cases}:GreenCase", f"{sample_cases}:RedCase"),
        exports=(ExportSettings(format="xml", path=str(target), durations=True),),
    )
    outcome = run_suite(suite)
    assert outcome.cases == 2
    assert outcome.failed_cases == 1
    assert outcome.exit_code == 1
    root = ET.parse(target).getroot()
    batches = root.findall("test-case")
    assert [[test.get("name") for test in batch] for batch in batches] == [
        ["equal lists", "truth"],
        ["still fine", "broken <case>"],
    ]


def test_run_suite_defaults_to_console(sample_cases: str, capsys: pytest.CaptureFixture[str]) -> None:
    outcome = run_suite(Suite(cases=(f"{sample_cases}:GreenCase",)))
    assert outcome.exit_code == 0
    output = capsys.readouterr().out
    assert "[PASSED] equal lists" in output
    assert "[PASSED] truth" in output

"""Test case engine running registered procedures sequentially."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, NoReturn, Optional, Tuple

from .outcome import Outcome, OutcomeSignal, TestFailed, TestPassed
from .records import TestRecord

logger = logging.getLogger(__name__)

TestProcedure = Callable[[], object]


class TestCase:
    """Holds registered tests and executes them in registration order.

    Subclasses register bound methods (or any zero-argument callable) and may
    override :meth:`setup` and :meth:`cleanup`. A test passes when it returns
    normally and fails when it raises :class:`TestFailed` or returns
    :attr:`Outcome.FAILED`.
    """

    __test__ = False

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or type(self).__name__
        self._tests: List[Tuple[TestProcedure, str]] = []
        self._results: List[TestRecord] = []

    def setup(self) -> None:
        """Prepare the environment before the first test runs."""

    def cleanup(self) -> None:
        """Release the environment after the last test ran."""

    def register(self, procedure: TestProcedure, name: str) -> None:
        if not callable(procedure):
            raise TypeError(f"Test procedure for '{name}' is not callable")
        self._tests.append((procedure, name))

    def run(self) -> bool:
        """Run every registered test once.

        Returns ``True`` if at least one test failed.
        """

        had_failure = False
        results: List[TestRecord] = []
        self._results = results
        logger.debug("Running %s: %d test(s)", self.name, len(self._tests))
        try:
            self.setup()
            for procedure, name in self._tests:
                record = self._execute(procedure, name)
                results.append(record)
                if not record.passed:
                    had_failure = True
        finally:
            self.cleanup()
        return had_failure

    def explicit_pass(self) -> NoReturn:
        raise TestPassed()

    def explicit_fail(self) -> NoReturn:
        raise TestFailed()

    def results(self) -> List[TestRecord]:
        return list(self._results)

    def tests(self) -> List[Tuple[TestProcedure, str]]:
        return list(self._tests)

    def _execute(self, procedure: TestProcedure, name: str) -> TestRecord:
        record = TestRecord(name=name, procedure=procedure)
        start = time.perf_counter()
        try:
            outcome = _outcome_of(procedure())
        except OutcomeSignal as signal:
            outcome = signal.outcome
        except Exception as exc:
            outcome = Outcome.FAILED
            record.error = f"{type(exc).__name__}: {exc}"
            logger.warning("Test '%s' in %s raised %r", name, self.name, exc, exc_info=True)
        record.duration_s = time.perf_counter() - start
        record.passed = outcome.passed
        logger.debug("%s: %s (%.6fs)", name, outcome.value, record.duration_s)
        return record


def _outcome_of(returned: object) -> Outcome:
    if isinstance(returned, Outcome):
        return returned
    return Outcome.PASSED

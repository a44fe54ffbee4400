"""Pass/fail outcome type and the signals that end a running test early."""
from __future__ import annotations

import enum
from typing import NoReturn


class Outcome(enum.Enum):
    """Two-valued result of a single test invocation."""

    PASSED = "passed"
    FAILED = "failed"

    @property
    def passed(self) -> bool:
        return self is Outcome.PASSED

    @classmethod
    def from_bool(cls, passed: bool) -> "Outcome":
        return cls.PASSED if passed else cls.FAILED


class OutcomeSignal(Exception):
    """Base class for exceptions that carry an outcome out of a test body."""

    outcome: Outcome

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or f"Test {self.outcome.value}")


class TestFailed(OutcomeSignal):
    """Raised to indicate that the running test has failed."""

    __test__ = False
    outcome = Outcome.FAILED


class TestPassed(OutcomeSignal):
    """Raised to indicate that the running test has passed."""

    __test__ = False
    outcome = Outcome.PASSED


def pass_test() -> NoReturn:
    """Successfully end the running test."""

    raise TestPassed()


def fail_test(message: str | None = None) -> NoReturn:
    """Fail the running test."""

    raise TestFailed(message)

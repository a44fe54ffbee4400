"""Core models and helpers exposed at the package level."""
from .assertions import (
    assert_no_exception,
    assert_sequence_equals,
    assert_sequence_in_range,
    assert_true,
)
from .case import TestCase, TestProcedure
from .outcome import Outcome, OutcomeSignal, TestFailed, TestPassed, fail_test, pass_test
from .records import TestRecord

__all__ = [
    "Outcome",
    "OutcomeSignal",
    "TestCase",
    "TestFailed",
    "TestPassed",
    "TestProcedure",
    "TestRecord",
    "assert_no_exception",
    "assert_sequence_equals",
    "assert_sequence_in_range",
    "assert_true",
    "fail_test",
    "pass_test",
]

"""Suite files listing test cases and exporters."""

from .loader import load_suite
from .models import Suite, SuiteOutcome
from .runner import load_test_case, run_suite

__all__ = [
    "Suite",
    "SuiteOutcome",
    "load_suite",
    "load_test_case",
    "run_suite",
]

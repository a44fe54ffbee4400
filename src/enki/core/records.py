"""Result data structures produced by the test case engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .outcome import Outcome


@dataclass
class TestRecord:
    """Outcome of executing a single registered test."""

    __test__ = False

    name: str
    procedure: Callable[[], object]
    passed: bool = False
    duration_s: float = 0.0
    error: Optional[str] = None

    @property
    def outcome(self) -> Outcome:
        return Outcome.from_bool(self.passed)

    @property
    def status(self) -> str:
        return self.outcome.value

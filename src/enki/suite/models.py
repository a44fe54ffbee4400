"""Data models for suite files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from enki.reporting import ExportSettings


@dataclass(frozen=True)
class Suite:
    """Test case targets to run and the exporters receiving their results."""

    cases: Sequence[str]
    exports: Sequence[ExportSettings] = field(default_factory=tuple)
    suite_dir: Optional[Path] = None


@dataclass(frozen=True)
class SuiteOutcome:
    """Aggregate of one suite run."""

    cases: int
    failed_cases: int

    @property
    def exit_code(self) -> int:
        return 0 if self.failed_cases == 0 else 1

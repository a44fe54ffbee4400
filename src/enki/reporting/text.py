"""Plain text exporters writing one line per test record."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Optional

import click

from enki.core.records import TestRecord

from .base import StreamResultExporter, open_sink

STATUS_COLORS = {
    "PASSED": "green",
    "FAILED": "red",
}


class TextStreamResultExporter(StreamResultExporter):
    """Exports records to a text stream.

    Each record is written as ``[RESULT] duration test_name`` where RESULT is
    ``PASSED`` or ``FAILED`` and the duration column is present only when
    durations are exported.
    """

    def __init__(
        self,
        stream: Optional[IO[str]],
        export_durations: bool = False,
        *,
        use_color: bool = False,
        owns_stream: bool = False,
    ) -> None:
        super().__init__(stream, export_durations, owns_stream=owns_stream)
        self._use_color = use_color

    def export_result(self, record: TestRecord) -> None:
        self._write(self.format_record(record) + "\n", color=None if self._use_color else False)

    def format_record(self, record: TestRecord) -> str:
        status = "PASSED" if record.passed else "FAILED"
        line = f"[{self._styled(status)}] "
        if self.export_durations:
            line += f"{record.duration_s:8.6f}s "
        return line + record.name

    def _styled(self, status: str) -> str:
        if not self._use_color:
            return status
        return click.style(status, fg=STATUS_COLORS[status])


class ConsoleResultExporter(TextStreamResultExporter):
    """Exports the test results to stdout."""

    def __init__(self, export_durations: bool = False, *, use_color: bool = True) -> None:
        super().__init__(None, export_durations, use_color=use_color)


class TextFileResultExporter(TextStreamResultExporter):
    """Exports the test results to a text file owned by the exporter."""

    def __init__(self, path: str | Path, export_durations: bool = False) -> None:
        self.path = Path(path)
        super().__init__(open_sink(self.path), export_durations, owns_stream=True)

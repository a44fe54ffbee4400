"""Exporter interface definitions."""
from __future__ import annotations

from pathlib import Path
from typing import IO, List, Optional, Sequence

import click

from enki.core.records import TestRecord


class SinkError(RuntimeError):
    """Raised when an exporter cannot open or write its output sink."""


class ResultExporter:
    """Interface for renderers of test records.

    The default :meth:`export_results` exports each record of a batch through
    :meth:`export_result`, in order.
    """

    def __init__(self, export_durations: bool = False) -> None:
        self._export_durations = export_durations

    @property
    def export_durations(self) -> bool:
        return self._export_durations

    def export_results(self, records: Sequence[TestRecord]) -> None:
        for record in records:
            self.export_result(record)

    def export_result(self, record: TestRecord) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:
        """Flush and release the sink. Safe to call more than once."""

    def __enter__(self) -> "ResultExporter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class StreamResultExporter(ResultExporter):
    """Exporter writing text to a stream it may or may not own.

    A ``None`` stream writes to the current standard output.
    """

    def __init__(self, stream: Optional[IO[str]], export_durations: bool = False, *, owns_stream: bool = False) -> None:
        super().__init__(export_durations)
        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if self._stream is None:
                click.get_text_stream("stdout").flush()
            elif self._owns_stream:
                self._stream.close()
            else:
                self._stream.flush()
        except OSError as exc:
            raise SinkError(f"Failed to close output stream: {exc}") from exc

    def _write(self, text: str, *, color: bool | None = False) -> None:
        if self._closed:
            raise SinkError("Cannot write to a closed exporter")
        try:
            click.echo(text, file=self._stream, nl=False, color=color)
        except (OSError, ValueError) as exc:
            raise SinkError(f"Failed to write results: {exc}") from exc


def open_sink(path: str | Path) -> IO[str]:
    """Create or truncate ``path`` for writing and return the open file."""

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        return target.open("w", encoding="utf-8")
    except OSError as exc:
        raise SinkError(f"Failed to open {target} for writing: {exc}") from exc


class ExporterGroup(ResultExporter):
    """Dispatches every batch to multiple exporters."""

    def __init__(self, exporters: Sequence[ResultExporter]) -> None:
        super().__init__(export_durations=False)
        self._exporters = list(exporters)

    def export_results(self, records: Sequence[TestRecord]) -> None:
        for exporter in self._exporters:
            exporter.export_results(records)

    def export_result(self, record: TestRecord) -> None:
        for exporter in self._exporters:
            exporter.export_result(record)

    def close(self) -> None:
        errors: List[Exception] = []
        for exporter in self._exporters:
            try:
                exporter.close()
            except Exception as exc:
                errors.append(exc)
        if errors:
            raise errors[0]

    def exporters(self) -> List[ResultExporter]:
        return list(self._exporters)

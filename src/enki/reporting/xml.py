"""XML exporters framing test records in a ``<test-results>`` document."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Sequence
from xml.sax.saxutils import escape

from enki.core.records import TestRecord

from .base import StreamResultExporter, open_sink

XML_PROLOGUE = '<?xml version="1.0" encoding="utf-8"?>\n'
_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


class XmlStreamResultExporter(StreamResultExporter):
    """Exports records to a text stream in XML format.

    The prologue and the ``<test-results>`` root are written on construction
    and the root is closed by :meth:`close`. Each call to
    :meth:`export_results` adds one ``<test-case>`` element.
    """

    def __init__(
        self,
        stream: Optional[IO[str]],
        export_durations: bool = False,
        *,
        owns_stream: bool = False,
    ) -> None:
        super().__init__(stream, export_durations, owns_stream=owns_stream)
        self._write(XML_PROLOGUE + "<test-results>\n")

    def export_results(self, records: Sequence[TestRecord]) -> None:
        self._write("\t<test-case>\n")
        for record in records:
            self.export_result(record)
        self._write("\t</test-case>\n")

    def export_result(self, record: TestRecord) -> None:
        attributes = f'result="{record.status}"'
        if self.export_durations:
            attributes += f' duration="{record.duration_s:.6f}"'
        attributes += f' name="{escape_attribute(record.name)}"'
        self._write(f"\t\t<test {attributes}/>\n")

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._write("</test-results>\n")
        finally:
            super().close()


class XmlFileResultExporter(XmlStreamResultExporter):
    """Exports the test results to an XML file owned by the exporter."""

    def __init__(self, path: str | Path, export_durations: bool = False) -> None:
        self.path = Path(path)
        stream = open_sink(self.path)
        try:
            super().__init__(stream, export_durations, owns_stream=True)
        except Exception:
            stream.close()
            raise


def escape_attribute(value: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for a double-quoted attribute."""

    return escape(value, _ATTRIBUTE_ENTITIES)

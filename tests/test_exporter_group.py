from __future__ import annotations

import io
from typing import List

import pytest

from enki.core import TestRecord
from enki.reporting import ExporterGroup, ResultExporter, TextStreamResultExporter, XmlStreamResultExporter


class BrokenCloseExporter(ResultExporter):
    """Exporter whose close fails with a non-sink error."""

    def __init__(self) -> None:
        super().__init__()
        self.exported: List[str] = []

    def export_result(self, record: TestRecord) -> None:
        self.exported.append(record.name)

    def close(self) -> None:
        raise ValueError("invalid document")


def _noop() -> None:
    pass


def test_group_dispatches_batches_to_every_exporter() -> None:
    stream = io.StringIO()
    broken = BrokenCloseExporter()
    group = ExporterGroup([broken, TextStreamResultExporter(stream)])
    group.export_results([TestRecord(name="one", procedure=_noop, passed=True)])
    assert broken.exported == ["one"]
    assert stream.getvalue() == "[PASSED] one\n"
    assert len(group.exporters()) == 2


def test_group_closes_remaining_exporters_after_a_failure() -> None:
    stream = io.StringIO()
    xml_exporter = XmlStreamResultExporter(stream)
    group = ExporterGroup([BrokenCloseExporter(), xml_exporter])
    with pytest.raises(ValueError, match="invalid document"):
        group.close()
    assert xml_exporter.closed
    assert stream.getvalue().endswith("</test-results>\n")

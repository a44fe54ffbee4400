from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from enki.core import TestCase, TestRecord
from enki.reporting import SinkError, XmlFileResultExporter, XmlStreamResultExporter
from enki.reporting.xml import escape_attribute


def _noop() -> None:
    pass


def test_xml_document_layout_without_durations() -> None:
    stream = io.StringIO()
    exporter = XmlStreamResultExporter(stream)
    exporter.export_results(
        [
            TestRecord(name="first", procedure=_noop, passed=True, duration_s=0.25),
            TestRecord(name="second", procedure=_noop, passed=False, duration_s=0.5),
        ]
    )
    exporter.close()
    assert stream.getvalue() == (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<test-results>\n"
        "\t<test-case>\n"
        '\t\t<test result="passed" name="first"/>\n'
        '\t\t<test result="failed" name="second"/>\n'
        "\t</test-case>\n"
        "</test-results>\n"
    )


def test_xml_duration_attribute_only_when_enabled() -> None:
    record = TestRecord(name="timed", procedure=_noop, passed=True, duration_s=0.125)
    stream = io.StringIO()
    with XmlStreamResultExporter(stream, export_durations=True) as exporter:
        exporter.export_results([record])
    element = ET.fromstring(stream.getvalue()).find("test-case/test")
    assert element is not None
    assert element.attrib == {"result": "passed", "duration": "0.125000", "name": "timed"}


def test_xml_escapes_attribute_values() -> None:
    name = 'a<b> & "c"'
    assert escape_attribute(name) == "a&lt;b&gt; &amp; &quot;c&quot;"
    stream = io.StringIO()
    with XmlStreamResultExporter(stream) as exporter:
        exporter.export_results([TestRecord(name=name, procedure=_noop, passed=False)])
    element = ET.fromstring(stream.getvalue()).find("test-case/test")
    assert element is not None
    assert element.get("name") == name


def test_xml_root_written_once_for_many_batches() -> None:
    case = TestCase()
    case.register(lambda: None, "one")
    case.run()
    stream = io.StringIO()
    exporter = XmlStreamResultExporter(stream, export_durations=True)
    exporter.export_results(case.results())
    exporter.export_results(case.results())
    exporter.export_results([])
    exporter.close()
    exporter.close()
    text = stream.getvalue()
    assert text.count("<test-results>") == 1
    assert text.count("</test-results>") == 1
    root = ET.fromstring(text)
    assert root.tag == "test-results"
    assert len(root.findall("test-case")) == 3
    assert [len(batch) for batch in root.findall("test-case")] == [1, 1, 0]


def test_xml_file_exporter_writes_well_formed_document(tmp_path: Path) -> None:
    case = TestCase()
    case.register(lambda: None, "passes")
    case.register(case.explicit_fail, "fails")
    case.run()
    target = tmp_path / "results.xml"
    with XmlFileResultExporter(target, export_durations=True) as exporter:
        exporter.export_results(case.results())
    root = ET.parse(target).getroot()
    tests = root.findall("test-case/test")
    assert [test.get("result") for test in tests] == ["passed", "failed"]
    assert all(float(test.get("duration", "-1")) >= 0 for test in tests)


class RejectingStream(io.StringIO):
    def write(self, text: str) -> int:
        raise OSError("read-only file system")


def test_xml_file_exporter_closes_file_when_prologue_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    stream = RejectingStream()
    monkeypatch.setattr("enki.reporting.xml.open_sink", lambda path: stream)
    with pytest.raises(SinkError, match="read-only"):
        XmlFileResultExporter(tmp_path / "results.xml")
    assert stream.closed

"""enki: a minimal unit-testing harness.

Register test procedures on a :class:`TestCase`, run it, and hand the
recorded results to an exporter::

    case = TestCase("arithmetic")
    case.register(lambda: assert_true(1 + 1 == 2), "addition")
    failed = case.run()
    with ConsoleResultExporter(export_durations=True) as exporter:
        exporter.export_results(case.results())
"""
from __future__ import annotations

from .core import (
    Outcome,
    TestCase,
    TestFailed,
    TestPassed,
    TestRecord,
    assert_no_exception,
    assert_sequence_equals,
    assert_sequence_in_range,
    assert_true,
    fail_test,
    pass_test,
)
from .reporting import (
    ConsoleResultExporter,
    ExportSettings,
    ResultExporter,
    SinkError,
    TextFileResultExporter,
    TextStreamResultExporter,
    XmlFileResultExporter,
    XmlStreamResultExporter,
    create_exporter,
)
from .version import __version__

__all__ = [
    "__version__",
    "ConsoleResultExporter",
    "ExportSettings",
    "Outcome",
    "ResultExporter",
    "SinkError",
    "TestCase",
    "TestFailed",
    "TestPassed",
    "TestRecord",
    "TextFileResultExporter",
    "TextStreamResultExporter",
    "XmlFileResultExporter",
    "XmlStreamResultExporter",
    "assert_no_exception",
    "assert_sequence_equals",
    "assert_sequence_in_range",
    "assert_true",
    "create_exporter",
    "fail_test",
    "pass_test",
]

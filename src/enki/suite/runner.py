"""Executor running the test cases of a suite through its exporters."""
from __future__ import annotations

import logging

from enki.core import TestCase
from enki.reporting import ExporterGroup, ExportSettings, ResultExporter, create_exporter
from enki.utils import resolve_target

from .models import Suite, SuiteOutcome

logger = logging.getLogger(__name__)


def load_test_case(target: str) -> TestCase:
    """Instantiate the test case named by ``target``.

    The target may name a :class:`TestCase` subclass, a zero-argument factory
    returning a test case, or a test case instance.
    """

    obj = resolve_target(target)
    case = obj
    if not isinstance(obj, TestCase) and callable(obj):
        case = obj()
    if not isinstance(case, TestCase):
        raise TypeError(f"Target '{target}' did not produce a TestCase (got {type(case).__name__})")
    return case


def run_suite(suite: Suite) -> SuiteOutcome:
    """Run every case of ``suite`` and export each one as a batch."""

    cases = [load_test_case(target) for target in suite.cases]
    failed = 0
    with _build_exporters(suite) as exporter:
        for case in cases:
            had_failure = case.run()
            records = case.results()
            logger.info(
                "%s: %d test(s), %d failed",
                case.name,
                len(records),
                sum(1 for record in records if not record.passed),
            )
            if had_failure:
                failed += 1
            exporter.export_results(records)
    return SuiteOutcome(cases=len(cases), failed_cases=failed)


def _build_exporters(suite: Suite) -> ResultExporter:
    settings = list(suite.exports) or [ExportSettings()]
    exporters: list[ResultExporter] = []
    try:
        for item in settings:
            exporters.append(create_exporter(item))
    except Exception:
        ExporterGroup(exporters).close()
        raise
    return ExporterGroup(exporters)

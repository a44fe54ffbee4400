"""JSON exporters emitting one structured document per exporter."""
from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Sequence

from jsonschema import validate

from enki.core.records import TestRecord

from .base import StreamResultExporter, open_sink
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonResultExporter(StreamResultExporter):
    """Collects batches of records and writes them as JSON on :meth:`close`.

    The document is validated against :data:`JSON_SCHEMA_V1` before it is
    written.
    """

    def __init__(
        self,
        stream: Optional[IO[str]],
        export_durations: bool = False,
        *,
        owns_stream: bool = False,
    ) -> None:
        super().__init__(stream, export_durations, owns_stream=owns_stream)
        self._batches: List[List[Dict[str, Any]]] = []

    def export_results(self, records: Sequence[TestRecord]) -> None:
        self._batches.append([])
        for record in records:
            self.export_result(record)

    def export_result(self, record: TestRecord) -> None:
        if not self._batches:
            self._batches.append([])
        self._batches[-1].append(self._record_to_dict(record))

    def payload(self) -> Dict[str, Any]:
        tests = [test for batch in self._batches for test in batch]
        passed = sum(1 for test in tests if test["result"] == "passed")
        return {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "summary": {
                "total": len(tests),
                "passed": passed,
                "failed": len(tests) - passed,
            },
            "test_cases": [{"tests": batch} for batch in self._batches],
        }

    def close(self) -> None:
        if self.closed:
            return
        try:
            payload = self.payload()
            validate(instance=payload, schema=JSON_SCHEMA_V1)
            self._write(json.dumps(payload, indent=2) + "\n")
        finally:
            super().close()

    def _record_to_dict(self, record: TestRecord) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": record.name, "result": record.status}
        if self.export_durations:
            data["duration"] = record.duration_s
        if record.error:
            data["error"] = record.error
        return data


class JsonFileResultExporter(JsonResultExporter):
    """Exports the test results to a JSON file owned by the exporter."""

    def __init__(self, path: str | Path, export_durations: bool = False) -> None:
        self.path = Path(path)
        super().__init__(open_sink(self.path), export_durations, owns_stream=True)

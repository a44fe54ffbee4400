"""Exporter selection from configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .base import ResultExporter
from .json_exporter import JsonFileResultExporter, JsonResultExporter
from .text import ConsoleResultExporter, TextFileResultExporter
from .xml import XmlFileResultExporter, XmlStreamResultExporter

EXPORT_FORMATS = ("text", "xml", "json")


@dataclass(frozen=True)
class ExportSettings:
    """Describes one exporter: output format, sink and rendering options.

    A ``path`` of ``None`` targets standard output.
    """

    format: str = "text"
    path: Optional[str] = None
    durations: bool = False
    color: bool = True

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ExportSettings":
        if not data:
            return cls()
        path = data.get("path")
        return cls(
            format=str(data.get("format", "text")).lower(),
            path=str(path) if path is not None else None,
            durations=bool(data.get("durations", False)),
            color=bool(data.get("color", True)),
        )


def create_exporter(settings: ExportSettings) -> ResultExporter:
    """Build the exporter variant described by ``settings``."""

    fmt = settings.format
    if fmt == "text":
        if settings.path:
            return TextFileResultExporter(settings.path, settings.durations)
        return ConsoleResultExporter(settings.durations, use_color=settings.color)
    if fmt == "xml":
        if settings.path:
            return XmlFileResultExporter(settings.path, settings.durations)
        return XmlStreamResultExporter(None, settings.durations)
    if fmt == "json":
        if settings.path:
            return JsonFileResultExporter(settings.path, settings.durations)
        return JsonResultExporter(None, settings.durations)
    supported = ", ".join(EXPORT_FORMATS)
    raise ValueError(f"Unknown export format '{fmt}'. Supported formats: {supported}")

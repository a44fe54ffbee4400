"""Reporting exports."""
from .base import ExporterGroup, ResultExporter, SinkError, StreamResultExporter
from .factory import EXPORT_FORMATS, ExportSettings, create_exporter
from .json_exporter import JsonFileResultExporter, JsonResultExporter
from .text import ConsoleResultExporter, TextFileResultExporter, TextStreamResultExporter
from .xml import XmlFileResultExporter, XmlStreamResultExporter

__all__ = [
    "EXPORT_FORMATS",
    "ConsoleResultExporter",
    "ExportSettings",
    "ExporterGroup",
    "JsonFileResultExporter",
    "JsonResultExporter",
    "ResultExporter",
    "SinkError",
    "StreamResultExporter",
    "TextFileResultExporter",
    "TextStreamResultExporter",
    "XmlFileResultExporter",
    "XmlStreamResultExporter",
    "create_exporter",
]

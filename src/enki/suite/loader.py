"""YAML loader and validation for suite files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from enki.reporting import EXPORT_FORMATS, ExportSettings

from .models import Suite

SUITE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["cases"],
    "properties": {
        "cases": {
            "type": "array",
            "minItems": 1,
            "items": {"type": "string", "minLength": 1},
        },
        "exports": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "format": {"enum": list(EXPORT_FORMATS)},
                    "path": {"type": "string", "minLength": 1},
                    "durations": {"type": "boolean"},
                    "color": {"type": "boolean"},
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(SUITE_SCHEMA)


def load_suite(path: str | Path) -> Suite:
    """Load and validate a suite file."""
    suite_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(suite_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Suite file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: "/".join(map(str, e.path)))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Suite schema validation failed: {messages}")
    base_dir = suite_path.parent
    exports = tuple(_parse_export(item, base_dir) for item in raw.get("exports") or [])
    return Suite(
        cases=tuple(str(case).strip() for case in raw["cases"]),
        exports=exports,
        suite_dir=base_dir,
    )


def _parse_export(raw: Mapping[str, Any], base_dir: Path) -> ExportSettings:
    settings = ExportSettings.from_mapping(raw)
    if settings.path is None:
        return settings
    path = Path(settings.path).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return ExportSettings(
        format=settings.format,
        path=str(path),
        durations=settings.durations,
        color=settings.color,
    )

"""JSON schema definition for exporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "enki test results",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "test_cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
            },
        },
        "test_cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["tests"],
                "properties": {
                    "tests": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "result"],
                            "properties": {
                                "name": {"type": "string"},
                                "result": {"enum": ["passed", "failed"]},
                                "duration": {"type": "number", "minimum": 0},
                                "error": {"type": "string"},
                            },
                            "additionalProperties": False,
                        },
                    },
                },
            },
        },
    },
}

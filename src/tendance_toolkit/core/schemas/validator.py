"""
Schema Validation Utilities

Validates the upstream tendance payload against its JSON schema before it
is decoded into RawOccurrence records.

The payload carries shortened record keys (m, sd, c, ey, et, cnt). A record
missing any of them, or carrying a negative count, fails validation here so
that decoding never has to guess.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


PAYLOAD_SCHEMA_NAME = "tendance_payload"


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _format_path(path) -> str:
    """Render a jsonschema error path as 'data[3].cnt'."""
    rendered = ""
    for item in path:
        if isinstance(item, int):
            rendered += f"[{item}]"
        else:
            rendered += f".{item}" if rendered else str(item)
    return rendered


def validate_payload(data: Any) -> None:
    """
    Validate an upstream payload against the tendance schema.

    Args:
        data: Parsed JSON payload

    Raises:
        ValidationError: If data is invalid. `path` points at the first
            failing location, `errors` lists every failure.
    """
    schema = _load_schema(PAYLOAD_SCHEMA_NAME)
    validator = jsonschema.Draft7Validator(schema)
    failures = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path)))
    if not failures:
        return

    errors = [f"{_format_path(e.path) or '<root>'}: {e.message}" for e in failures]
    first = failures[0]
    raise ValidationError(
        f"Invalid tendance payload ({len(errors)} error(s)): {errors[0]}",
        path=_format_path(first.path),
        errors=errors,
    )

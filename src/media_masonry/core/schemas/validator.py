"""
Schema Validation Utilities

Validates raw media API records against the JSON schemas shipped next to
this module before they are turned into MediaItem objects.

Structure is validated strictly (ids, URLs, nesting). Dimensions are only
type-checked: a record with missing or zero dimensions is still a valid
record, the layout engine decides to drop it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.media import MediaKind


# Schema files per media kind (stickers share the GIF shape)
_SCHEMA_FILES: dict[MediaKind, str] = {
    MediaKind.GIF: "gif_item",
    MediaKind.STICKER: "gif_item",
    MediaKind.CLIP: "clip_item",
}

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
    """Raised when a record fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_item_record(data: Any, kind: MediaKind) -> None:
    """
    Validate a raw API record for the given media kind.

    Args:
        data: Decoded JSON record
        kind: Collection the record was fetched from

    Raises:
        ValidationError: If the record does not match the schema. All
            violations are collected in ``errors``; ``path`` points at
            the first one.
    """
    schema = _load_schema(_SCHEMA_FILES[kind])
    validator = jsonschema.Draft202012Validator(schema)
    violations = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not violations:
        return

    errors = [
        f"{'/'.join(str(p) for p in v.absolute_path) or '<root>'}: {v.message}"
        for v in violations
    ]
    first = violations[0]
    raise ValidationError(
        f"Invalid {kind} record: {errors[0]}",
        path="/".join(str(p) for p in first.absolute_path),
        errors=errors,
    )

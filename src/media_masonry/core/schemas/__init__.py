"""JSON schemas for raw media API records."""

from .validator import ValidationError, validate_item_record

__all__ = [
    "ValidationError",
    "validate_item_record",
]

"""Core utilities (serialization)."""

from .serialization import (
    CLIP_PLACEHOLDER_HEIGHT,
    CLIP_PLACEHOLDER_WIDTH,
    load_items_json,
    parse_item_record,
    save_items_json,
)

__all__ = [
    "CLIP_PLACEHOLDER_HEIGHT",
    "CLIP_PLACEHOLDER_WIDTH",
    "load_items_json",
    "parse_item_record",
    "save_items_json",
]

"""
Serialization Utilities

Turns raw media API records into MediaItem objects and reads/writes item
lists as JSON.

Record shapes:
- GIF / sticker: dimensions from ``file.md.webp``, thumbnail from
  ``file.sm.webp`` (falling back to ``file.md.webp``), inserted media from
  ``file.md.gif``.
- Clip: thumbnail/poster from ``file.webp``, inserted media from
  ``file.mp4``. The API does not report clip dimensions, so a 16:9
  placeholder is used unless ``file.width``/``file.height`` are present.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from ..models.media import MediaItem, MediaKind
from ..schemas.validator import validate_item_record


# Placeholder geometry for clip thumbnails (16:9)
CLIP_PLACEHOLDER_WIDTH = 160
CLIP_PLACEHOLDER_HEIGHT = 90


def _dig(data: Any, *keys: str) -> Any:
    """Walk nested dicts, returning None at the first missing key."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


# ─────────────────────────────────────────────────────────────────────────────
# API Records
# ─────────────────────────────────────────────────────────────────────────────

def parse_item_record(
    record: dict[str, Any],
    kind: MediaKind,
    *,
    validate: bool = True,
) -> MediaItem:
    """
    Build a MediaItem from a raw API record.

    Args:
        record: Decoded JSON record from a results page
        kind: Collection the record was fetched from
        validate: Whether to validate against the record schema first

    Returns:
        MediaItem (dimensions may be None; see module docstring)

    Raises:
        ValidationError: If validate=True and the record is malformed
    """
    if validate:
        validate_item_record(record, kind)

    title = record.get("title") or ""

    if kind.is_video:
        file = record.get("file", {})
        width = file.get("width")
        height = file.get("height")
        if width is None and height is None:
            width, height = CLIP_PLACEHOLDER_WIDTH, CLIP_PLACEHOLDER_HEIGHT
        return MediaItem(
            id=str(record["id"]),
            width=width,
            height=height,
            display_url=file.get("webp", ""),
            kind=kind,
            title=title,
            insert_url=file.get("mp4"),
            poster_url=file.get("webp"),
            has_audio=record.get("hasAudio", True),
            raw=record,
        )

    webp = _dig(record, "file", "md", "webp") or {}
    display_url = _dig(record, "file", "sm", "webp", "url") or webp.get("url", "")
    return MediaItem(
        id=str(record["id"]),
        width=webp.get("width"),
        height=webp.get("height"),
        display_url=display_url,
        kind=kind,
        title=title,
        insert_url=_dig(record, "file", "md", "gif", "url"),
        raw=record,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Item Lists
# ─────────────────────────────────────────────────────────────────────────────

def load_items_json(path: Path, *, kind: Optional[MediaKind] = None) -> list[MediaItem]:
    """
    Load a JSON list of items.

    Args:
        path: JSON file holding a list
        kind: If given, entries are raw API records of this kind;
            otherwise they are ``MediaItem.to_dict()`` dictionaries

    Raises:
        ValueError: If the file does not hold a JSON list, or an item
            entry is not a dictionary with an id
        ValidationError: If a raw record is malformed
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of items in {path}")
    if kind is not None:
        return [parse_item_record(entry, kind) for entry in data]

    items = []
    for n, entry in enumerate(data):
        try:
            items.append(MediaItem.from_dict(entry))
        except ValueError as e:
            raise ValueError(f"Item entry {n} in {path}: {e}") from e
    return items


def save_items_json(items: Iterable[MediaItem], path: Path) -> None:
    """Write items as a JSON list of ``MediaItem.to_dict()`` dictionaries."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([item.to_dict() for item in items], f, indent=2)

"""
Module: media

Purpose:
    Provides the MediaItem dataclass - one entry of the media stream
    (GIF, sticker or video clip) as handed to the layout engine. Carries
    the intrinsic dimensions that drive row packing plus the payload the
    insertion collaborator needs.

Key Classes:
    - MediaKind: Media collection an item belongs to
    - MediaItem: Immutable media entry

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.packer: Reads intrinsic dimensions
    - core.utils.serialization: Builds items from API records
    - feed.feed: Accumulates items page by page
    - output: Renders and inserts items
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any, Optional


class MediaKind(str, Enum):
    """Media collection an item was fetched from."""
    GIF = "gif"
    STICKER = "sticker"
    CLIP = "clip"

    def __str__(self) -> str:
        return self.value

    @property
    def collection(self) -> str:
        """API path segment for this kind (e.g. "gifs")."""
        return f"{self.value}s"

    @property
    def is_video(self) -> bool:
        return self is MediaKind.CLIP


def _is_valid_dimension(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    return math.isfinite(number) and number > 0


@dataclass(frozen=True)
class MediaItem:
    """
    Media entry (immutable).

    Only ``width`` and ``height`` matter to the layout engine. They describe
    the native aspect ratio and may be missing or nonsensical when the API
    omits them; such items are dropped from layouts rather than rejected here.

    Attributes:
        id: Unique item identifier
        width: Intrinsic width (any positive unit), or None if unknown
        height: Intrinsic height, or None if unknown
        display_url: Thumbnail rendered in the grid
        kind: Collection the item came from
        title: Human readable title, used as alt text
        insert_url: Full media URL (GIF or MP4) inserted on selection
        poster_url: Still image shown for clips
        has_audio: Whether a clip carries sound
        raw: Original API record (not compared)

    Example:
        >>> item = MediaItem("a1", 200, 100, "https://cdn/a1.webp")
        >>> item.aspect_ratio
        2.0
    """

    id: str
    width: Optional[float]
    height: Optional[float]
    display_url: str = ""
    kind: MediaKind = MediaKind.GIF
    title: str = ""
    insert_url: Optional[str] = None
    poster_url: Optional[str] = None
    has_audio: bool = False
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def has_valid_dimensions(self) -> bool:
        """True when both intrinsic dimensions are finite positive numbers."""
        return _is_valid_dimension(self.width) and _is_valid_dimension(self.height)

    @property
    def aspect_ratio(self) -> Optional[float]:
        """Width / height, or None when the dimensions are invalid."""
        if not self.has_valid_dimensions:
            return None
        return float(self.width) / float(self.height)

    @property
    def is_video(self) -> bool:
        return self.kind.is_video

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        The raw API record is not included.
        """
        d = {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "display_url": self.display_url,
            "kind": str(self.kind),
        }
        if self.title:
            d["title"] = self.title
        if self.insert_url is not None:
            d["insert_url"] = self.insert_url
        if self.poster_url is not None:
            d["poster_url"] = self.poster_url
        if self.has_audio:
            d["has_audio"] = True
        return d

    @classmethod
    def from_dict(cls, data: dict) -> MediaItem:
        """
        Deserialize from dictionary.

        Missing dimensions are kept as None; the layout engine drops them.

        Raises:
            ValueError: If data is not a dictionary or has no id
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an item dictionary, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValueError("Item has no id")
        return cls(
            id=str(data["id"]),
            width=data.get("width"),
            height=data.get("height"),
            display_url=data.get("display_url", ""),
            kind=MediaKind(data.get("kind", MediaKind.GIF.value)),
            title=data.get("title", ""),
            insert_url=data.get("insert_url"),
            poster_url=data.get("poster_url"),
            has_audio=bool(data.get("has_audio", False)),
        )

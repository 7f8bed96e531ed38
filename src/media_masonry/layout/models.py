"""
Module: layout.models

Purpose:
    Data models for the masonry layout.
    Immutable dataclasses representing packed items, rows and placements.

Key Classes:
    - PackedItem: MediaItem with its render size
    - Row: Items sharing one row height
    - ItemPlacement: PackedItem positioned in the grid
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - core.models: MediaItem

Used By:
    - layout.packer: Creates PackedItems and Rows
    - layout.sequencer: Creates ItemPlacements and LayoutResult
    - output: Renders LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field

from media_masonry.core.models import MediaItem


@dataclass(frozen=True)
class PackedItem:
    """
    A media item annotated with the size chosen for its row.

    Attributes:
        item: Source media item
        width: Render width (fractional, never above max_item_width)
        height: Render height (the row height)
    """

    item: MediaItem
    width: float
    height: int

    @property
    def id(self) -> str:
        return self.item.id


@dataclass(frozen=True)
class Row:
    """
    One masonry row (never empty).

    Attributes:
        items: Packed items in input order
        height: Row height shared by every item
        delta: Container width minus the row's width before the residual
            was spread over the items (0 means a perfect fit)
        consumed: Window slots used, counting skipped invalid items

    Example:
        >>> row.width  # items + gaps, equals container width when unclamped
        280.0
    """

    items: tuple[PackedItem, ...]
    height: int
    delta: float
    consumed: int
    gap: int = 0

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("Row must contain at least one item")

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def width(self) -> float:
        """Rendered width including gaps."""
        return sum(p.width for p in self.items) + self.gap * (len(self.items) - 1)


@dataclass(frozen=True)
class ItemPlacement:
    """
    A packed item positioned in the grid.

    Attributes:
        packed: The PackedItem to place
        x: Left offset from the container's left edge
        y: Top offset from the container's top edge
        row_index: Index of the row holding the item
    """

    packed: PackedItem
    x: float
    y: int
    row_index: int

    @property
    def id(self) -> str:
        return self.packed.id

    @property
    def width(self) -> float:
        return self.packed.width

    @property
    def height(self) -> int:
        return self.packed.height

    @property
    def right(self) -> float:
        return self.x + self.packed.width

    @property
    def bottom(self) -> int:
        return self.y + self.packed.height


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        rows: Rows top to bottom
        placements: Every placed item in input order
        dropped_ids: Ids of items left out because of invalid dimensions
        gap: Vertical gap between rows

    Example:
        >>> result = layout_items(items, LayoutConfig())
        >>> result.row_count
        4
    """

    rows: tuple[Row, ...] = ()
    placements: tuple[ItemPlacement, ...] = ()
    dropped_ids: tuple[str, ...] = field(default_factory=tuple)
    gap: int = 0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def item_count(self) -> int:
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def height(self) -> int:
        """Total height of the grid (no trailing gap)."""
        if not self.rows:
            return 0
        return sum(row.height for row in self.rows) + self.gap * (len(self.rows) - 1)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "height": self.height,
            "rows": [
                {
                    "height": row.height,
                    "delta": row.delta,
                    "items": [p.id for p in row.items],
                }
                for row in self.rows
            ],
            "placements": [
                {
                    "id": p.id,
                    "row": p.row_index,
                    "x": p.x,
                    "y": p.y,
                    "width": p.width,
                    "height": p.height,
                    "display_url": p.packed.item.display_url,
                    "kind": str(p.packed.item.kind),
                }
                for p in self.placements
            ],
            "dropped": list(self.dropped_ids),
        }

"""
Module: layout.sequencer

Purpose:
    Build a complete masonry layout from a flat item stream.
    Packs rows window by window, then stacks them vertically.

Key Functions:
    - build_rows(): Split the stream into packed rows
    - position_rows(): Assign absolute x/y to every packed item
    - layout_items(): Main entry point (rows + positions)

Algorithm:
    1. Slice the next max_window_size items at the cursor
    2. Pack a row from the window
    3. Empty row (no valid items) -> skip one item; otherwise advance the
       cursor by the window slots the row consumed
    4. Stack rows with `gap` between them; within a row, items are laid
       left to right with `gap` between them

    The layout is recomputed from scratch on every call.

Dependencies:
    - layout.packer: pack_row
    - layout.models: Row, ItemPlacement, LayoutResult

Used By:
    - cli: layout command
    - output: renderers consume LayoutResult
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from media_masonry.core.models import MediaItem

from .config import LayoutConfig
from .models import ItemPlacement, LayoutResult, Row
from .packer import pack_row

logger = logging.getLogger(__name__)


def build_rows(items: Sequence[MediaItem], config: LayoutConfig) -> List[Row]:
    """
    Split items into packed rows.

    Args:
        items: Ordered item stream
        config: Layout configuration

    Returns:
        Rows in stream order. Items with invalid dimensions appear in none.
    """
    rows: List[Row] = []
    cursor = 0

    while cursor < len(items):
        window = items[cursor:cursor + config.max_window_size]
        if not window:
            break

        result = pack_row(window, config)
        if result.is_empty:
            # Nothing valid at the cursor; skip it so the loop always advances
            cursor += 1
            continue

        rows.append(result.row)
        cursor += result.consumed

    return rows


def position_rows(rows: Sequence[Row], gap: int) -> List[ItemPlacement]:
    """
    Assign absolute positions to the items of stacked rows.

    Row r starts at the sum of (height + gap) of the rows above it; each
    item starts at the sum of (width + gap) of the items to its left.
    """
    placements: List[ItemPlacement] = []
    y = 0
    for row_index, row in enumerate(rows):
        x = 0.0
        for packed in row.items:
            placements.append(ItemPlacement(packed=packed, x=x, y=y, row_index=row_index))
            x += packed.width + gap
        y += row.height + gap
    return placements


def layout_items(items: Sequence[MediaItem], config: LayoutConfig) -> LayoutResult:
    """
    Lay out an item stream as a fixed-width masonry grid.

    Pure and deterministic: the same items and config always give the
    same rows and positions. Never raises for bad item data; items with
    invalid dimensions are dropped and reported in dropped_ids.

    Args:
        items: Ordered item stream
        config: Layout configuration

    Returns:
        LayoutResult with rows and placements

    Example:
        >>> result = layout_items(items, LayoutConfig())
        >>> [p.y for p in result.placements]
        [0, 0, 0, 82, 82]
    """
    items = list(items)
    rows = build_rows(items, config)
    placements = position_rows(rows, config.gap)

    dropped = tuple(item.id for item in items if not item.has_valid_dimensions)
    if dropped:
        logger.debug(f"Dropped {len(dropped)} items with invalid dimensions: {list(dropped)}")

    logger.info(f"Laid out {len(placements)} items in {len(rows)} rows")

    return LayoutResult(
        rows=tuple(rows),
        placements=tuple(placements),
        dropped_ids=dropped,
        gap=config.gap,
    )

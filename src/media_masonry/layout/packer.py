"""
Module: layout.packer

Purpose:
    Pack the next masonry row from a short window of items.
    Picks one row height and a width per item so the row's total width
    best approximates the container width.

Key Functions:
    - pack_row(): Pack one row from a window

Algorithm:
    Greedy scan, O(window size x height range):
    1. For every candidate height (ascending), grow a prefix of the window
       one slot at a time, skipping items with invalid dimensions.
    2. Score each prefix by |delta| = |container - (widths + gaps)|.
    3. Keep the best-scoring (height, prefix). A single-item candidate is
       only ever taken as the very first candidate, and any multi-item
       candidate replaces a single-item best.
    4. Spread the winning delta evenly over the row's items, flooring
       each final width at MIN_RENDER_WIDTH.

    Only contiguous prefixes and integer heights are tried, so this is an
    approximation, not an optimal packer. Row breaks are observable by
    callers; keep the search exactly as is.

Dependencies:
    - layout.config: LayoutConfig
    - layout.models: PackedItem, Row

Used By:
    - layout.sequencer: Row sequencing
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from media_masonry.core.models import MediaItem

from .config import LayoutConfig
from .models import PackedItem, Row

logger = logging.getLogger(__name__)

# Floor for finalized widths; row choice and delta are unaffected
MIN_RENDER_WIDTH = 1


@dataclass(frozen=True)
class PackResult:
    """
    Outcome of packing one window.

    Attributes:
        row: Packed row, or None if no item in the window had valid dimensions
        consumed: Window slots used by the row (0 when row is None)
    """

    row: Optional[Row]
    consumed: int

    @property
    def is_empty(self) -> bool:
        return self.row is None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def candidate_width(item: MediaItem, height: int, config: LayoutConfig) -> int:
    """Width of item scaled to height, rounded and capped at max_item_width."""
    # Cap before rounding; a huge aspect ratio scales to inf
    scaled = float(item.width) * height / float(item.height)
    return round_half_up(min(scaled, config.max_item_width))


def _is_better(delta: float, count: int, best_delta: float, best_count: int) -> bool:
    if abs(delta) < abs(best_delta) or (best_count == 1 and count != 1):
        # A lone item may only seed the search, never replace a best
        return count != 1 or best_count == 0
    return False


def pack_row(window: Sequence[MediaItem], config: LayoutConfig) -> PackResult:
    """
    Pack a row from a contiguous prefix of window.

    Items with missing or non-positive dimensions are skipped without
    ending the prefix, so an invalid item in the middle of the window is
    left out while the items after it can still join the row.

    Args:
        window: Next items of the stream (only the first
            config.max_window_size are considered)
        config: Layout configuration

    Returns:
        PackResult with the row and the number of window slots it used.
        Never raises for bad item data.

    Example:
        >>> items = [MediaItem("a", 100, 100), MediaItem("b", 200, 100), MediaItem("c", 50, 100)]
        >>> result = pack_row(items, LayoutConfig())
        >>> result.row.height, result.consumed
        (77, 3)
    """
    window = list(window)[: config.max_window_size]

    best: List[Tuple[MediaItem, int]] = []
    best_delta = math.inf
    best_height = config.min_height
    best_consumed = 0

    for height in config.height_range:
        candidate: List[Tuple[MediaItem, int]] = []
        total = 0
        for slot, item in enumerate(window):
            if not item.has_valid_dimensions:
                continue

            width = candidate_width(item, height, config)
            candidate.append((item, width))
            total += width

            delta = config.container_width - (total + config.gap * (len(candidate) - 1))
            if _is_better(delta, len(candidate), best_delta, len(best)):
                best = list(candidate)
                best_delta = delta
                best_height = height
                best_consumed = slot + 1

    if not best:
        logger.debug(f"No valid items in window of {len(window)}: {[i.id for i in window]}")
        return PackResult(row=None, consumed=0)

    share = best_delta / len(best)
    packed = tuple(
        PackedItem(
            item=item,
            width=max(min(width + share, config.max_item_width), MIN_RENDER_WIDTH),
            height=best_height,
        )
        for item, width in best
    )

    logger.debug(
        f"Packed {len(packed)}/{len(window)} items at height {best_height} "
        f"(delta {best_delta}, consumed {best_consumed})"
    )

    return PackResult(
        row=Row(
            items=packed,
            height=best_height,
            delta=best_delta,
            consumed=best_consumed,
            gap=config.gap,
        ),
        consumed=best_consumed,
    )

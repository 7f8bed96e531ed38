"""
Module: layout

Purpose:
    Row-packing masonry layout engine.
    Converts a flat media item stream into positioned rows that fill a
    fixed container width.

Key Functions:
    - pack_row(): Pack one row from a window of items
    - layout_items(): Main entry point for layout

Key Classes:
    - LayoutConfig: Configuration for the grid
    - PackedItem: Item with render size
    - Row: Items sharing one height
    - LayoutResult: Rows plus absolute placements

Dependencies:
    - core.models: MediaItem

Used By:
    - cli: layout command
    - output: renderers
"""

from .config import LayoutConfig, load_layout_config
from .models import PackedItem, Row, ItemPlacement, LayoutResult
from .packer import PackResult, pack_row
from .sequencer import build_rows, layout_items, position_rows

__all__ = [
    # Config
    "LayoutConfig",
    "load_layout_config",
    # Models
    "PackedItem",
    "Row",
    "ItemPlacement",
    "LayoutResult",
    # Functions
    "PackResult",
    "pack_row",
    "build_rows",
    "position_rows",
    "layout_items",
]

"""
Module: layout.config

Purpose:
    Configuration for the masonry layout engine.
    Defines the container width, gaps and the row height search range.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Key Functions:
    - load_layout_config(): Read a LayoutConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - layout.packer: Row packing
    - layout.sequencer: Row stacking
    - cli: --config option
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


DEFAULT_CONTAINER_WIDTH = 280
DEFAULT_GAP = 5
DEFAULT_MIN_HEIGHT = 50
DEFAULT_MAX_HEIGHT = 380
DEFAULT_MAX_ITEM_WIDTH = 280
DEFAULT_MAX_WINDOW_SIZE = 3


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for masonry layout (immutable).

    Attributes:
        container_width: Target width every row is fitted to
        gap: Horizontal gap between items and vertical gap between rows
        min_height: Smallest row height tried (inclusive)
        max_height: Largest row height tried (inclusive)
        max_item_width: Upper bound for any single item's width
        max_window_size: Most items considered for one row

    Example:
        >>> config = LayoutConfig()
        >>> len(config.height_range)
        331  # 50..380 inclusive
    """

    container_width: int = DEFAULT_CONTAINER_WIDTH
    gap: int = DEFAULT_GAP
    min_height: int = DEFAULT_MIN_HEIGHT
    max_height: int = DEFAULT_MAX_HEIGHT
    max_item_width: int = DEFAULT_MAX_ITEM_WIDTH
    max_window_size: int = DEFAULT_MAX_WINDOW_SIZE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.container_width <= 0:
            raise ValueError(f"container_width must be positive: {self.container_width}")
        if self.gap < 0:
            raise ValueError(f"gap must be non-negative: {self.gap}")
        if self.min_height <= 0:
            raise ValueError(f"min_height must be positive: {self.min_height}")
        if self.max_height < self.min_height:
            raise ValueError(
                f"max_height must be >= min_height: {self.max_height} < {self.min_height}"
            )
        if self.max_item_width <= 0:
            raise ValueError(f"max_item_width must be positive: {self.max_item_width}")
        if self.max_window_size < 1:
            raise ValueError(f"max_window_size must be >= 1: {self.max_window_size}")

    @property
    def height_range(self) -> range:
        """Candidate row heights, ascending."""
        return range(self.min_height, self.max_height + 1)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutConfig:
        """
        Build a config from a mapping, using defaults for missing keys.

        Unknown keys are ignored with a warning.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown layout options: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


def load_layout_config(path: Path) -> LayoutConfig:
    """
    Load a LayoutConfig from a JSON file.

    Args:
        path: JSON file holding an object of LayoutConfig fields

    Returns:
        LayoutConfig (defaults if the file does not exist)

    Raises:
        ValueError: If the file is not a JSON object or holds invalid values
    """
    if not path.exists():
        logger.info(f"No layout config at {path}, using defaults")
        return LayoutConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Layout config {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Layout config {path} must hold a JSON object")

    return LayoutConfig.from_dict(data)

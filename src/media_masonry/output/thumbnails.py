"""
Module: output.thumbnails

Purpose:
    Abstract interface for loading item thumbnails as PIL images.

Key Classes:
    - ThumbnailProvider: Abstract base class for thumbnail access
    - DirectoryThumbnailProvider: Thumbnails stored as <dir>/<id>.<ext>
    - ThumbnailNotFoundError: Exception for missing thumbnails

Dependencies:
    - PIL: Image loading

Used By:
    - output.renderer: ContactSheetRenderer
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from media_masonry.core.models import MediaItem


class ThumbnailNotFoundError(Exception):
    """Thumbnail not available for an item."""
    pass


class ThumbnailProvider(ABC):
    """Abstract interface for accessing item thumbnails."""

    @abstractmethod
    def get_thumbnail(self, item: MediaItem) -> Image.Image:
        """
        Get the thumbnail for an item.

        Raises:
            ThumbnailNotFoundError: If no thumbnail exists for the item
        """


class DirectoryThumbnailProvider(ThumbnailProvider):
    """
    Thumbnails stored in a directory, one file per item id.

    Example:
        >>> provider = DirectoryThumbnailProvider(Path("thumbs"))
        >>> provider.get_thumbnail(item).size
        (320, 180)
    """

    EXTENSIONS: Tuple[str, ...] = (".webp", ".png", ".jpg", ".jpeg", ".gif")

    def __init__(self, directory: Path):
        self.directory = directory

    def path_for(self, item: MediaItem) -> Optional[Path]:
        """First existing <id><ext> file, or None."""
        for ext in self.EXTENSIONS:
            candidate = self.directory / f"{item.id}{ext}"
            if candidate.exists():
                return candidate
        return None

    def get_thumbnail(self, item: MediaItem) -> Image.Image:
        path = self.path_for(item)
        if path is None:
            raise ThumbnailNotFoundError(f"No thumbnail for {item.id} in {self.directory}")
        try:
            with Image.open(path) as img:
                # Animated formats: first frame only
                img.seek(0)
                return img.convert("RGBA")
        except OSError as e:
            raise ThumbnailNotFoundError(f"Unreadable thumbnail {path}: {e}") from e

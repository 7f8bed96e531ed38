"""
media-masonry Core Package

Shared data models, record schemas and serialization helpers used by the
layout engine and by the feed/output collaborators.
"""

from .models import MediaItem, MediaKind

__all__ = [
    "MediaItem",
    "MediaKind",
]

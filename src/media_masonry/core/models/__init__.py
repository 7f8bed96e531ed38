"""
Core Models Package

Immutable data models shared by the layout engine and its collaborators.
"""

from .media import MediaItem, MediaKind

__all__ = [
    "MediaItem",
    "MediaKind",
]

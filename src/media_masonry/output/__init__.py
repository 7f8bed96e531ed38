"""
Module: output

Purpose:
    Collaborators that consume the layout engine's output: renderers for
    a LayoutResult and inserters for a selected MediaItem.
"""

from .inserter import HtmlSnippetInserter, Inserter, build_insertion_html
from .renderer import ContactSheetRenderer, HtmlRenderer, Renderer
from .thumbnails import DirectoryThumbnailProvider, ThumbnailNotFoundError, ThumbnailProvider

__all__ = [
    # Renderers
    "Renderer",
    "HtmlRenderer",
    "ContactSheetRenderer",
    # Thumbnails
    "ThumbnailProvider",
    "DirectoryThumbnailProvider",
    "ThumbnailNotFoundError",
    # Insertion
    "Inserter",
    "HtmlSnippetInserter",
    "build_insertion_html",
]

"""
Module: output.inserter

Purpose:
    Turn a selected media item into an HTML snippet for a host document.
    How the snippet reaches the document is up to the caller's sink.

Key Functions:
    - build_insertion_html(): Snippet for one item

Key Classes:
    - Inserter: Abstract insertion capability
    - HtmlSnippetInserter: Builds the snippet and hands it to a sink
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from media_masonry.core.models import MediaItem

logger = logging.getLogger(__name__)

IMAGE_STYLE = "max-width:100%;height:auto;"
VIDEO_CAPTION = "Click to watch video"


def build_insertion_html(item: MediaItem) -> Optional[str]:
    """
    Build the HTML inserted for item.

    Images insert the full GIF. Clips insert their poster linked to the MP4.

    Returns:
        Snippet, or None if the item has nothing to insert
    """
    if not item.insert_url:
        return None

    url = html.escape(item.insert_url)
    if item.is_video:
        poster = html.escape(item.poster_url or item.display_url)
        return (
            f'<a href="{url}" target="_blank" rel="noopener noreferrer">'
            f'<img src="{poster}" alt="Video thumbnail" style="{IMAGE_STYLE}" />'
            f'<p style="font-size:10px; color:#555;">{VIDEO_CAPTION}</p>'
            f"</a>"
        )

    alt = html.escape(item.title)
    return f'<img src="{url}" alt="{alt}" style="{IMAGE_STYLE}" />'


class Inserter(ABC):
    """Capability that inserts a selected item into a host document."""

    @abstractmethod
    def insert(self, item: MediaItem) -> None:
        """Insert item; implementations decide the transport."""


class HtmlSnippetInserter(Inserter):
    """
    Inserter that passes each item's HTML snippet to a sink callable.

    Example:
        >>> snippets = []
        >>> HtmlSnippetInserter(snippets.append).insert(item)
    """

    def __init__(self, sink: Callable[[str], None]):
        self.sink = sink

    def insert(self, item: MediaItem) -> None:
        snippet = build_insertion_html(item)
        if snippet is None:
            logger.warning(f"Nothing to insert for {item.id}: no insert URL")
            return
        self.sink(snippet)

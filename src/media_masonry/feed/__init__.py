"""
Module: feed

Purpose:
    Fetch media records from a paged API and accumulate them into the
    deduplicated item stream consumed by the layout engine.

Key Classes:
    - MediaFeed: Paged item accumulator
    - PageSource: Abstract page fetcher
    - KlipyPageSource: HTTP implementation (requests)
    - FeedConfig: API settings
    - FeedError: Exception for fetch failures
"""

from .source import FeedConfig, FeedError, KlipyPageSource, PageSource
from .feed import MediaFeed

__all__ = [
    "FeedConfig",
    "FeedError",
    "KlipyPageSource",
    "PageSource",
    "MediaFeed",
]

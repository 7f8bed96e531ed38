"""
Module: feed.source

Purpose:
    Abstract interface for fetching pages of raw media records, plus the
    HTTP implementation for the Klipy media API.

Key Classes:
    - FeedConfig: API endpoint settings
    - PageSource: Abstract base class for page access
    - KlipyPageSource: requests-based implementation
    - FeedError: Exception for fetch failures

Dependencies:
    - requests: HTTP client

Used By:
    - feed.feed: MediaFeed
    - cli: fetch command
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from media_masonry.core.models import MediaKind

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api.klipy.co/api/v1"
DEFAULT_PER_PAGE = 50
DEFAULT_TIMEOUT_S = 10.0


class FeedError(Exception):
    """Error fetching or decoding a page of media."""
    pass


@dataclass(frozen=True)
class FeedConfig:
    """
    Media API settings (immutable).

    Attributes:
        api_key: Key embedded in the endpoint path
        base_url: API root without trailing slash
        per_page: Records requested per page
        timeout: Request timeout in seconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    per_page: int = DEFAULT_PER_PAGE
    timeout: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.api_key:
            raise ValueError("api_key must not be empty")
        if self.per_page <= 0:
            raise ValueError(f"per_page must be positive: {self.per_page}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")


class PageSource(ABC):
    """
    Abstract interface for fetching pages of raw records.

    Implementations handle transport; callers get plain decoded records.
    """

    @abstractmethod
    def fetch_page(
        self,
        kind: MediaKind,
        query: str,
        page: int,
        per_page: int,
    ) -> List[Dict[str, Any]]:
        """
        Fetch one page of records.

        Args:
            kind: Media collection
            query: Search text; empty for trending items
            page: 1-based page number
            per_page: Records requested

        Returns:
            Decoded records (possibly fewer than per_page)

        Raises:
            FeedError: If the page cannot be fetched or decoded
        """


class KlipyPageSource(PageSource):
    """
    Page source backed by the Klipy HTTP API.

    Example:
        >>> source = KlipyPageSource(FeedConfig(api_key="KEY"))
        >>> records = source.fetch_page(MediaKind.GIF, "cats", page=1, per_page=50)
    """

    def __init__(self, config: FeedConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def endpoint_for(self, kind: MediaKind, query: str) -> str:
        """Search endpoint when a query is given, trending otherwise."""
        root = f"{self.config.base_url.rstrip('/')}/{self.config.api_key}/{kind.collection}"
        return f"{root}/search" if query else f"{root}/trending"

    def fetch_page(
        self,
        kind: MediaKind,
        query: str,
        page: int,
        per_page: int,
    ) -> List[Dict[str, Any]]:
        url = self.endpoint_for(kind, query)
        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        if query:
            params["q"] = query

        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FeedError(f"Failed to fetch {kind} page {page}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise FeedError(f"Invalid JSON in {kind} page {page}: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        records = data.get("data") if isinstance(data, dict) else None
        if records is None:
            logger.warning(f"No records in {kind} page {page} response")
            return []
        if not isinstance(records, list):
            raise FeedError(f"Unexpected records type in {kind} page {page}: {type(records).__name__}")

        logger.debug(f"Fetched {len(records)} {kind} records (page {page}, query={query!r})")
        return records

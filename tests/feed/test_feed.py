"""
Unit tests for MediaFeed page accumulation.
"""

import logging

import pytest

from media_masonry.core.models import MediaKind
from media_masonry.feed import FeedError, MediaFeed, PageSource


class FakeSource(PageSource):
    """Page source serving canned pages and recording calls."""

    def __init__(self, pages, error=None):
        self.pages = pages
        self.error = error
        self.calls = []

    def fetch_page(self, kind, query, page, per_page):
        self.calls.append((kind, query, page, per_page))
        if self.error is not None:
            raise self.error
        return self.pages[page - 1] if page <= len(self.pages) else []


class TestMediaFeedPaging:
    """Tests for fetching and has_more."""

    def test_fetch_when_full_page_then_appends_and_has_more(self, gif_record):
        source = FakeSource([[gif_record("a"), gif_record("b")]])
        feed = MediaFeed(source, MediaKind.GIF, query="cats", per_page=2)

        added = feed.fetch_next_page()

        assert added == 2
        assert [i.id for i in feed.items] == ["a", "b"]
        assert feed.has_more
        assert source.calls == [(MediaKind.GIF, "cats", 1, 2)]

    def test_fetch_when_short_page_then_no_more(self, gif_record):
        source = FakeSource([[gif_record("a"), gif_record("b")], [gif_record("c")]])
        feed = MediaFeed(source, per_page=2)

        feed.fetch_next_page()
        feed.fetch_next_page()

        assert not feed.has_more
        assert feed.pages_loaded == 2
        assert [i.id for i in feed.items] == ["a", "b", "c"]

    def test_fetch_when_no_more_then_source_not_called(self, gif_record):
        source = FakeSource([[gif_record("a")]])
        feed = MediaFeed(source, per_page=2)
        feed.fetch_next_page()

        assert feed.fetch_next_page() == 0
        assert len(source.calls) == 1

    def test_fetch_pages_when_results_run_out_then_stops_early(self, gif_record):
        source = FakeSource([[gif_record("a"), gif_record("b")], [gif_record("c")]])
        feed = MediaFeed(source, per_page=2)

        added = feed.fetch_pages(5)

        assert added == 3
        assert len(source.calls) == 2

    def test_init_when_per_page_not_positive_then_raises(self):
        with pytest.raises(ValueError, match="per_page"):
            MediaFeed(FakeSource([]), per_page=0)


class TestMediaFeedItems:
    """Tests for deduplication and record handling."""

    def test_fetch_when_ids_repeat_across_pages_then_first_wins(self, gif_record):
        source = FakeSource([
            [gif_record("a", 100, 100), gif_record("b")],
            [gif_record("a", 999, 1), gif_record("c")],
        ])
        feed = MediaFeed(source, per_page=2)

        feed.fetch_pages(2)

        assert [i.id for i in feed.items] == ["a", "b", "c"]
        assert feed.items[0].width == 100

    def test_fetch_when_record_malformed_then_skipped_with_warning(self, gif_record, caplog):
        source = FakeSource([[gif_record("a"), {"id": "broken"}, gif_record("c")]])
        feed = MediaFeed(source, per_page=3)

        with caplog.at_level(logging.WARNING):
            added = feed.fetch_next_page()

        assert added == 2
        assert [i.id for i in feed.items] == ["a", "c"]
        assert "Skipping malformed" in caplog.text
        # The malformed record still counts towards a full page
        assert feed.has_more

    def test_fetch_when_clip_kind_then_builds_clip_items(self, clip_record):
        feed = MediaFeed(FakeSource([[clip_record("c1")]]), MediaKind.CLIP, per_page=10)

        feed.fetch_next_page()

        assert feed.items[0].is_video

    def test_items_when_mutated_by_caller_then_feed_unchanged(self, gif_record):
        feed = MediaFeed(FakeSource([[gif_record("a")]]), per_page=5)
        feed.fetch_next_page()

        feed.items.clear()

        assert len(feed.items) == 1


class TestMediaFeedReset:
    """Tests for reset and error handling."""

    def test_reset_when_query_changes_then_starts_over(self, gif_record):
        source = FakeSource([[gif_record("a")]])
        feed = MediaFeed(source, query="cats", per_page=1)
        feed.fetch_next_page()

        feed.reset(kind=MediaKind.STICKER, query="dogs")

        assert feed.items == []
        assert feed.pages_loaded == 0
        assert feed.has_more
        assert feed.kind is MediaKind.STICKER
        assert feed.query == "dogs"

        feed.fetch_next_page()
        assert source.calls[-1] == (MediaKind.STICKER, "dogs", 1, 1)
        assert [i.id for i in feed.items] == ["a"]

    def test_fetch_when_source_fails_then_error_propagates_and_state_kept(self, gif_record):
        feed = MediaFeed(FakeSource([], error=FeedError("boom")), per_page=2)

        with pytest.raises(FeedError, match="boom"):
            feed.fetch_next_page()

        assert feed.pages_loaded == 0
        assert feed.has_more
        assert feed.items == []

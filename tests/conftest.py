import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import media_masonry
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from media_masonry.core.models import MediaItem, MediaKind  # noqa: E402
from media_masonry.layout import LayoutConfig  # noqa: E402


# Common test fixtures
@pytest.fixture
def config() -> LayoutConfig:
    """Default grid: 280 wide, 5px gap, heights 50..380, window of 3."""
    return LayoutConfig()


@pytest.fixture
def make_item():
    """Factory for media items with given intrinsic dimensions."""
    def _create(item_id: str, width, height, kind: MediaKind = MediaKind.GIF) -> MediaItem:
        return MediaItem(
            id=item_id,
            width=width,
            height=height,
            display_url=f"https://cdn.example/{item_id}.webp",
            kind=kind,
            title=f"Item {item_id}",
            insert_url=f"https://cdn.example/{item_id}.gif",
        )
    return _create


@pytest.fixture
def gif_record():
    """Factory for raw GIF API records."""
    def _create(item_id="g1", width=200, height=100, title="Cat"):
        return {
            "id": item_id,
            "title": title,
            "file": {
                "md": {
                    "webp": {"url": f"https://cdn.example/md/{item_id}.webp", "width": width, "height": height},
                    "gif": {"url": f"https://cdn.example/md/{item_id}.gif", "width": width, "height": height},
                },
                "sm": {"webp": {"url": f"https://cdn.example/sm/{item_id}.webp"}},
            },
        }
    return _create


@pytest.fixture
def clip_record():
    """Factory for raw clip API records."""
    def _create(item_id="c1", **extra):
        record = {
            "id": item_id,
            "slug": f"clip-{item_id}",
            "title": "Clip",
            "file": {
                "webp": f"https://cdn.example/{item_id}.webp",
                "mp4": f"https://cdn.example/{item_id}.mp4",
                "thumbnail_url_webp": f"https://cdn.example/{item_id}_t.webp",
            },
        }
        record.update(extra)
        return record
    return _create

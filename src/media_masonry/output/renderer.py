"""
Module: output.renderer

Purpose:
    Render a LayoutResult for display.
    Each ItemPlacement becomes one positioned element (HTML) or one
    pasted tile (image).

Key Classes:
    - Renderer: Abstract renderer consuming a LayoutResult
    - HtmlRenderer: Absolutely positioned HTML fragment
    - ContactSheetRenderer: Single PIL image of the whole grid

Dependencies:
    - PIL: Image composition
    - layout.models: LayoutResult, ItemPlacement

Used By:
    - cli: --html / --png options
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageOps

from media_masonry.layout.config import LayoutConfig
from media_masonry.layout.models import ItemPlacement, LayoutResult

from .thumbnails import ThumbnailNotFoundError, ThumbnailProvider

logger = logging.getLogger(__name__)

# Colors
BACKGROUND_COLOR = (255, 255, 255)
PLACEHOLDER_COLOR = (222, 222, 222)
PLACEHOLDER_OUTLINE = (190, 190, 190)


def _px(value: float) -> str:
    """Format a CSS pixel length without trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        text = "0"
    return text + "px"


class Renderer(ABC):
    """Capability that turns a layout into something displayable."""

    @abstractmethod
    def render(self, layout: LayoutResult):
        """Render the layout. Return type depends on the implementation."""


class HtmlRenderer(Renderer):
    """
    Render a layout as an HTML fragment.

    Items are absolutely positioned inside a relative container. Clips are
    rendered as muted, looping video elements with a poster frame; playback
    is left to the page.
    """

    def __init__(self, config: LayoutConfig, *, border_radius: int = 8):
        self.config = config
        self.border_radius = border_radius

    def _element(self, placement: ItemPlacement) -> str:
        item = placement.packed.item
        style = (
            f"position:absolute;left:{_px(placement.x)};top:{_px(placement.y)};"
            f"width:{_px(placement.width)};height:{_px(placement.height)};"
            f"overflow:hidden;border-radius:{self.border_radius}px;"
        )
        media_style = "width:100%;height:100%;object-fit:cover;"

        if item.is_video:
            poster = item.poster_url or item.display_url
            source = f' src="{html.escape(item.insert_url)}"' if item.insert_url else ""
            media = (
                f'<video{source} poster="{html.escape(poster)}" muted loop playsinline '
                f'preload="metadata" style="{media_style}"></video>'
            )
        else:
            media = (
                f'<img src="{html.escape(item.display_url)}" alt="{html.escape(item.title)}" '
                f'style="{media_style}" />'
            )

        return (
            f'  <div class="media-item" data-id="{html.escape(item.id)}" '
            f'style="{style}">{media}</div>'
        )

    def render(self, layout: LayoutResult) -> str:
        lines: List[str] = [
            f'<div class="masonry-container" style="position:relative;'
            f'width:{self.config.container_width}px;height:{layout.height}px;">'
        ]
        lines.extend(self._element(p) for p in layout.placements)
        lines.append("</div>")
        return "\n".join(lines)

    def render_to_file(self, layout: LayoutResult, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(layout) + "\n", encoding="utf-8")
        logger.info(f"HTML written to {output_path}")


class ContactSheetRenderer(Renderer):
    """
    Render a layout as one image, thumbnails cropped to fill their boxes.

    Items whose thumbnail is unavailable get a placeholder tile.

    Example:
        >>> renderer = ContactSheetRenderer(config, DirectoryThumbnailProvider(thumbs))
        >>> renderer.render(layout).size
        (280, 1042)
    """

    def __init__(
        self,
        config: LayoutConfig,
        provider: Optional[ThumbnailProvider] = None,
        *,
        background: Tuple[int, int, int] = BACKGROUND_COLOR,
    ):
        self.config = config
        self.provider = provider
        self.background = background

    @staticmethod
    def _box(placement: ItemPlacement) -> Tuple[int, int, int, int]:
        """Integer (left, top, width, height); adjacent boxes never overlap."""
        left = round(placement.x)
        right = round(placement.right)
        return left, placement.y, max(1, right - left), max(1, placement.height)

    def _tile(self, placement: ItemPlacement, size: Tuple[int, int]) -> Optional[Image.Image]:
        if self.provider is None:
            return None
        try:
            thumb = self.provider.get_thumbnail(placement.packed.item)
        except ThumbnailNotFoundError as e:
            logger.warning(f"Using placeholder for {placement.id}: {e}")
            return None
        return ImageOps.fit(thumb.convert("RGBA"), size, method=Image.Resampling.LANCZOS)

    def render(self, layout: LayoutResult) -> Image.Image:
        canvas = Image.new(
            "RGB",
            (self.config.container_width, max(1, layout.height)),
            self.background,
        )
        draw = ImageDraw.Draw(canvas)

        for placement in layout.placements:
            left, top, width, height = self._box(placement)
            tile = self._tile(placement, (width, height))
            if tile is None:
                draw.rectangle(
                    (left, top, left + width - 1, top + height - 1),
                    fill=PLACEHOLDER_COLOR,
                    outline=PLACEHOLDER_OUTLINE,
                )
                continue
            canvas.paste(tile, (left, top), tile)

        return canvas

    def render_to_file(self, layout: LayoutResult, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.render(layout).save(output_path)
        logger.info(f"Contact sheet written to {output_path}")

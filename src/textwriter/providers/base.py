from __future__ import annotations

from abc import ABC, abstractmethod

from textwriter.geometry import Rect
from textwriter.glyph import Glyph


class FontMetricsProvider(ABC):
    """Everything the layout engine and measurer need from a font."""

    @abstractmethod
    def glyph_index(self, codepoint: int) -> int:
        """Return the glyph id for ``codepoint``; unmapped codepoints yield a fallback id."""

    @abstractmethod
    def rasterize(self, glyph_id: int, pixel_size: int) -> Glyph:
        """Render ``glyph_id`` at ``pixel_size``.

        Raises ``RasterizationFailure`` when the glyph cannot be rendered.
        """

    @abstractmethod
    def unit_bbox(self, codepoint: int, scale_x: float, scale_y: float) -> Rect:
        """Return the bitmap box of ``codepoint`` at the given scale.

        Raises ``BoundingBoxAbsent`` when the codepoint has no outline.
        """

    @abstractmethod
    def em_to_pixel_scale(self, pixel_size: float) -> float:
        """Return the factor mapping font units to pixels for an em of ``pixel_size``."""

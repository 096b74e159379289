"""Deterministic provider used to exercise layout without a real font."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import numpy as np

from textwriter.errors import BoundingBoxAbsent, RasterizationFailure
from textwriter.geometry import Rect
from textwriter.glyph import Glyph
from textwriter.providers.base import FontMetricsProvider

NOTDEF_GLYPH_ID = 0


@dataclass(slots=True, frozen=True)
class FixedGlyphMetrics:
    """Metrics returned for a glyph regardless of the requested pixel size.

    ``coverage`` is row-major; when omitted every pixel is fully covered.
    ``unit_box`` is in font units with y growing downwards, ``None`` meaning
    the glyph has no outline.
    """

    width: int
    height: int
    left_bearing: int = 0
    top_bearing: int = 0
    coverage: bytes | None = None
    unit_box: Rect | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Glyph dimensions must be non-negative")
        if self.coverage is not None and len(self.coverage) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} coverage bytes, got {len(self.coverage)}"
            )

    def to_glyph(self) -> Glyph:
        if self.coverage is None:
            coverage = np.full((self.height, self.width), 255, dtype=np.uint8)
        else:
            coverage = np.frombuffer(self.coverage, dtype=np.uint8).reshape(
                self.height, self.width
            )
        return Glyph(
            width=self.width,
            height=self.height,
            left_bearing=self.left_bearing,
            top_bearing=self.top_bearing,
            coverage=coverage,
        )


class FixedMetricsProvider(FontMetricsProvider):
    """Serve glyphs from an in-memory table.

    Characters are assigned glyph ids from 1 in sorted order; id 0 is the
    ``notdef`` glyph used for unmapped codepoints. ``cmap_overrides`` lets a
    codepoint resolve to an arbitrary id, including ones with no glyph behind
    them, which then fail to rasterize.
    """

    def __init__(
        self,
        glyphs: Mapping[str, FixedGlyphMetrics],
        *,
        units_per_em: int = 1000,
        notdef: FixedGlyphMetrics | None = None,
        cmap_overrides: Mapping[int, int] | None = None,
    ) -> None:
        if units_per_em <= 0:
            raise ValueError("units_per_em must be positive")
        self._units_per_em = units_per_em
        self._cmap: dict[int, int] = {}
        self._glyphs: dict[int, FixedGlyphMetrics] = {}
        if notdef is not None:
            self._glyphs[NOTDEF_GLYPH_ID] = notdef
        for glyph_id, char in enumerate(sorted(glyphs), start=1):
            self._cmap[ord(char)] = glyph_id
            self._glyphs[glyph_id] = glyphs[char]
        self._cmap.update(cmap_overrides or {})
        self.rasterized: list[tuple[int, int]] = []

    @classmethod
    def monospace(
        cls,
        chars: str,
        *,
        width: int,
        height: int,
        left_bearing: int = 0,
        top_bearing: int = 0,
        units_per_em: int = 1000,
    ) -> "FixedMetricsProvider":
        """Build a provider where every character in ``chars`` shares one box."""

        unit_box = Rect(0, -height * units_per_em // 10, width * units_per_em // 10, 0)
        metrics = FixedGlyphMetrics(
            width=width,
            height=height,
            left_bearing=left_bearing,
            top_bearing=top_bearing,
            unit_box=unit_box,
        )
        return cls(
            {char: metrics for char in chars},
            units_per_em=units_per_em,
            notdef=metrics,
        )

    def glyph_index(self, codepoint: int) -> int:
        return self._cmap.get(codepoint, NOTDEF_GLYPH_ID)

    def rasterize(self, glyph_id: int, pixel_size: int) -> Glyph:
        metrics = self._glyphs.get(glyph_id)
        if metrics is None:
            raise RasterizationFailure(glyph_id, pixel_size, "no such glyph")
        self.rasterized.append((glyph_id, pixel_size))
        return metrics.to_glyph()

    def unit_bbox(self, codepoint: int, scale_x: float, scale_y: float) -> Rect:
        metrics = self._glyphs.get(self.glyph_index(codepoint))
        if metrics is None or metrics.unit_box is None:
            raise BoundingBoxAbsent(codepoint)
        box = metrics.unit_box
        return Rect(
            x0=int(box.x0 * scale_x),
            y0=int(box.y0 * scale_y),
            x1=int(box.x1 * scale_x),
            y1=int(box.y1 * scale_y),
        )

    def em_to_pixel_scale(self, pixel_size: float) -> float:
        return pixel_size / self._units_per_em

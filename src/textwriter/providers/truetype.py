from __future__ import annotations

import io
import math
from os import PathLike
from pathlib import Path

import freetype
import numpy as np

from textwriter.errors import (BoundingBoxAbsent, ConfigurationError,
                               RasterizationFailure)
from textwriter.geometry import Rect
from textwriter.glyph import Glyph
from textwriter.providers.base import FontMetricsProvider
from textwriter.utilities.logging import get_logger

logger = get_logger(__name__)


class FreeTypeFontProvider(FontMetricsProvider):
    """TrueType/OpenType provider backed by FreeType through ``freetype-py``."""

    def __init__(self, face: freetype.Face) -> None:
        if not face.is_scalable:
            raise ConfigurationError(
                f"Font {face.family_name!r} has no scalable outlines"
            )
        if face.units_per_EM <= 0:
            raise ConfigurationError(
                f"Font {face.family_name!r} reports {face.units_per_EM} units per em"
            )
        self._face = face
        self._units_per_em = face.units_per_EM

    @classmethod
    def from_path(
        cls, path: str | PathLike[str], *, face_index: int = 0
    ) -> "FreeTypeFontProvider":
        resolved = Path(path)
        try:
            face = freetype.Face(str(resolved), index=face_index)
        except freetype.FT_Exception as exc:
            raise ConfigurationError(f"Unable to load font {resolved}: {exc}") from exc
        logger.info("Loaded font %s (face %s)", resolved, face_index)
        return cls(face)

    @classmethod
    def from_bytes(cls, data: bytes, *, face_index: int = 0) -> "FreeTypeFontProvider":
        try:
            face = freetype.Face(io.BytesIO(data), index=face_index)
        except freetype.FT_Exception as exc:
            raise ConfigurationError(f"Unable to parse font data: {exc}") from exc
        logger.info("Loaded %s byte font from memory (face %s)", len(data), face_index)
        return cls(face)

    @property
    def units_per_em(self) -> int:
        return self._units_per_em

    @property
    def num_glyphs(self) -> int:
        return self._face.num_glyphs

    def glyph_index(self, codepoint: int) -> int:
        # FreeType maps unknown codepoints to 0 (.notdef)
        return self._face.get_char_index(codepoint)

    def rasterize(self, glyph_id: int, pixel_size: int) -> Glyph:
        face = self._face
        try:
            face.set_pixel_sizes(0, pixel_size)
            face.load_glyph(glyph_id, freetype.FT_LOAD_RENDER)
        except freetype.FT_Exception as exc:
            logger.warning(
                "FreeType could not render glyph %s at %spx: %s",
                glyph_id,
                pixel_size,
                exc,
            )
            raise RasterizationFailure(glyph_id, pixel_size, str(exc)) from exc

        slot = face.glyph
        coverage = _bitmap_coverage(slot.bitmap, glyph_id, pixel_size)
        return Glyph(
            width=slot.bitmap.width,
            height=slot.bitmap.rows,
            left_bearing=slot.bitmap_left,
            top_bearing=-slot.bitmap_top,
            coverage=coverage,
        )

    def unit_bbox(self, codepoint: int, scale_x: float, scale_y: float) -> Rect:
        glyph_id = self.glyph_index(codepoint)
        try:
            self._face.load_glyph(glyph_id, freetype.FT_LOAD_NO_SCALE)
        except freetype.FT_Exception as exc:
            raise BoundingBoxAbsent(codepoint) from exc

        outline = self._face.glyph.outline
        if outline.n_points == 0:
            raise BoundingBoxAbsent(codepoint)

        cbox = outline.get_cbox()
        # Font units are y-up; flip so the box matches bitmap space.
        return Rect(
            x0=math.floor(cbox.xMin * scale_x),
            y0=math.floor(-cbox.yMax * scale_y),
            x1=math.ceil(cbox.xMax * scale_x),
            y1=math.ceil(-cbox.yMin * scale_y),
        )

    def em_to_pixel_scale(self, pixel_size: float) -> float:
        return pixel_size / self._units_per_em


def _bitmap_coverage(bitmap, glyph_id: int, pixel_size: int) -> np.ndarray:
    """Copy an 8-bit FreeType bitmap into a top-down ``(rows, width)`` array."""

    width, rows = bitmap.width, bitmap.rows
    if width == 0 or rows == 0:
        return np.zeros((rows, width), dtype=np.uint8)

    if bitmap.pixel_mode != freetype.FT_PIXEL_MODE_GRAY:
        logger.warning(
            "Glyph %s at %spx rendered in unsupported pixel mode %s",
            glyph_id,
            pixel_size,
            bitmap.pixel_mode,
        )
        raise RasterizationFailure(
            glyph_id, pixel_size, f"unsupported pixel mode {bitmap.pixel_mode}"
        )

    pitch = bitmap.pitch
    buffer = np.asarray(bitmap.buffer, dtype=np.uint8).reshape(rows, abs(pitch))
    if pitch < 0:
        # Negative pitch stores the bottom row first.
        buffer = buffer[::-1]
    return np.ascontiguousarray(buffer[:, :width])

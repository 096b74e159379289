"""Tests for the FreeType-backed provider against pygame's bundled font."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import freetype
import numpy as np
import pytest

from textwriter.errors import (BoundingBoxAbsent, ConfigurationError,
                               RasterizationFailure)
from textwriter.providers import FreeTypeFontProvider
from textwriter.providers import truetype as truetype_module


@pytest.fixture(scope="module")
def truetype(font_path: Path) -> FreeTypeFontProvider:
    return FreeTypeFontProvider.from_path(font_path)


class TestLoading:
    def test_from_bytes_matches_from_path(
        self, font_path: Path, truetype: FreeTypeFontProvider
    ) -> None:
        from_memory = FreeTypeFontProvider.from_bytes(font_path.read_bytes())

        assert from_memory.units_per_em == truetype.units_per_em
        assert from_memory.glyph_index(ord("A")) == truetype.glyph_index(ord("A"))

    def test_garbage_bytes_raise_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            FreeTypeFontProvider.from_bytes(b"definitely not a font")

    def test_missing_file_raises_configuration_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            FreeTypeFontProvider.from_path(tmp_path / "missing.ttf")


class TestGlyphs:
    def test_mapped_and_unmapped_codepoints(self, truetype: FreeTypeFontProvider) -> None:
        assert truetype.glyph_index(ord("A")) != 0
        assert truetype.glyph_index(0x10FFFD) == 0

    def test_rasterize_produces_coverage_above_baseline(
        self, truetype: FreeTypeFontProvider
    ) -> None:
        glyph = truetype.rasterize(truetype.glyph_index(ord("A")), 16)

        assert glyph.width > 0 and glyph.height > 0
        assert glyph.coverage.shape == (glyph.height, glyph.width)
        assert glyph.coverage.dtype == np.uint8
        assert glyph.coverage.max() > 0
        assert glyph.top_bearing < 0

    def test_larger_size_gives_larger_bitmap(self, truetype: FreeTypeFontProvider) -> None:
        glyph_id = truetype.glyph_index(ord("M"))

        small = truetype.rasterize(glyph_id, 10)
        large = truetype.rasterize(glyph_id, 40)

        assert large.width > small.width
        assert large.height > small.height

    def test_blank_glyph_has_empty_coverage(self, truetype: FreeTypeFontProvider) -> None:
        glyph = truetype.rasterize(truetype.glyph_index(ord(" ")), 16)

        assert glyph.coverage.size == 0

    def test_out_of_range_glyph_id_fails(self, truetype: FreeTypeFontProvider) -> None:
        bad_id = truetype.num_glyphs + 10

        with pytest.raises(RasterizationFailure) as excinfo:
            truetype.rasterize(bad_id, 16)

        assert excinfo.value.glyph_id == bad_id
        assert excinfo.value.pixel_size == 16


class TestBoundingBoxes:
    def test_unit_box_is_in_font_units_with_y_down(
        self, truetype: FreeTypeFontProvider
    ) -> None:
        box = truetype.unit_bbox(ord("A"), 1.0, 1.0)

        assert box.x0 < box.x1
        assert box.y0 < 0
        assert box.height > truetype.units_per_em // 2

    def test_space_has_no_outline(self, truetype: FreeTypeFontProvider) -> None:
        with pytest.raises(BoundingBoxAbsent):
            truetype.unit_bbox(ord(" "), 1.0, 1.0)

    def test_em_scale(self, truetype: FreeTypeFontProvider) -> None:
        assert truetype.em_to_pixel_scale(11.0) == pytest.approx(
            11.0 / truetype.units_per_em
        )


def _gray_bitmap(rows: int, width: int, pitch: int, buffer: list[int]) -> SimpleNamespace:
    return SimpleNamespace(
        width=width,
        rows=rows,
        pitch=pitch,
        buffer=buffer,
        pixel_mode=freetype.FT_PIXEL_MODE_GRAY,
    )


class TestBitmapCoverage:
    def test_positive_pitch_drops_row_padding(self) -> None:
        bitmap = _gray_bitmap(2, 2, 3, [1, 2, 0, 3, 4, 0])

        coverage = truetype_module._bitmap_coverage(bitmap, 7, 12)

        np.testing.assert_array_equal(coverage, [[1, 2], [3, 4]])

    def test_negative_pitch_is_flipped_top_down(self) -> None:
        """Bottom-up buffers come back with the top row first."""
        bitmap = _gray_bitmap(2, 2, -3, [3, 4, 0, 1, 2, 0])

        coverage = truetype_module._bitmap_coverage(bitmap, 7, 12)

        np.testing.assert_array_equal(coverage, [[1, 2], [3, 4]])

    def test_unsupported_pixel_mode_warns_and_fails(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        warnings: list[tuple[object, ...]] = []
        monkeypatch.setattr(
            truetype_module.logger, "warning", lambda *args: warnings.append(args)
        )
        bitmap = SimpleNamespace(
            width=8,
            rows=1,
            pitch=1,
            buffer=[255],
            pixel_mode=freetype.FT_PIXEL_MODE_MONO,
        )

        with pytest.raises(RasterizationFailure) as excinfo:
            truetype_module._bitmap_coverage(bitmap, 7, 12)

        assert excinfo.value.glyph_id == 7
        assert len(warnings) == 1

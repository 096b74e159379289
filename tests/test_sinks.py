"""Tests for the reference pixel sinks."""

from __future__ import annotations

import pygame
import pytest

from textwriter.geometry import Coords
from textwriter.sinks import CoverageFramebuffer, RecordingSink, SurfaceSink


class TestCoverageFramebuffer:
    def test_stores_coverage_and_clips(self) -> None:
        framebuffer = CoverageFramebuffer(4, 3)

        framebuffer(Coords(1, 2), 200)
        framebuffer(Coords(-1, 0), 255)
        framebuffer(Coords(4, 0), 255)
        framebuffer(Coords(0, 3), 255)

        assert framebuffer.size == (4, 3)
        assert framebuffer.pixels[2, 1] == 200
        assert int(framebuffer.pixels.sum()) == 200

    def test_zero_coverage_is_skipped_by_default(self) -> None:
        framebuffer = CoverageFramebuffer(2, 2)
        framebuffer(Coords(0, 0), 90)

        framebuffer(Coords(0, 0), 0)

        assert framebuffer.pixels[0, 0] == 90

    def test_zero_coverage_can_overwrite(self) -> None:
        framebuffer = CoverageFramebuffer(2, 2, skip_zero=False)
        framebuffer(Coords(0, 0), 90)

        framebuffer(Coords(0, 0), 0)

        assert framebuffer.pixels[0, 0] == 0

    def test_to_image_is_greyscale(self) -> None:
        framebuffer = CoverageFramebuffer(5, 2)
        framebuffer(Coords(4, 1), 128)

        image = framebuffer.to_image()

        assert image.mode == "L"
        assert image.size == (5, 2)
        assert image.getpixel((4, 1)) == 128

    def test_clear(self) -> None:
        framebuffer = CoverageFramebuffer(2, 2)
        framebuffer(Coords(1, 1), 5)

        framebuffer.clear()

        assert not framebuffer.pixels.any()

    def test_rejects_empty_dimensions(self) -> None:
        with pytest.raises(ValueError):
            CoverageFramebuffer(0, 4)


class TestSurfaceSink:
    def test_writes_color_with_coverage_alpha(self) -> None:
        surface = pygame.Surface((3, 3), pygame.SRCALPHA)
        sink = SurfaceSink(surface, (255, 105, 180))

        sink(Coords(1, 1), 77)
        sink(Coords(5, 5), 255)
        sink(Coords(0, 0), 0)

        assert tuple(surface.get_at((1, 1))) == (255, 105, 180, 77)
        assert surface.get_at((0, 0)).a == 0


class TestRecordingSink:
    def test_keeps_emission_order_and_bounds(self) -> None:
        sink = RecordingSink()

        sink(Coords(3, -1), 0)
        sink(Coords(-2, 4), 9)

        assert len(sink) == 2
        assert sink.coordinates() == [Coords(3, -1), Coords(-2, 4)]
        assert sink.bounds() == (-2, -1, 3, 4)

    def test_bounds_of_nothing(self) -> None:
        assert RecordingSink().bounds() is None

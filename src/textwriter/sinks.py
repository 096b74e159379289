"""Pixel sinks that store coverage without blending."""

from __future__ import annotations

import numpy as np
import pygame
from PIL import Image

from textwriter.geometry import Coords


class CoverageFramebuffer:
    """Greyscale framebuffer backed by a ``(height, width)`` ``uint8`` array.

    Out-of-range coordinates are dropped. Zero-coverage pixels are skipped by
    default so a glyph's empty margin does not erase its neighbour.
    """

    def __init__(self, width: int, height: int, *, skip_zero: bool = True) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Framebuffer dimensions must be positive")
        self.pixels = np.zeros((height, width), dtype=np.uint8)
        self._skip_zero = skip_zero

    @property
    def size(self) -> tuple[int, int]:
        height, width = self.pixels.shape
        return width, height

    def __call__(self, coords: Coords, coverage: int) -> None:
        if coverage == 0 and self._skip_zero:
            return
        width, height = self.size
        if 0 <= coords.x < width and 0 <= coords.y < height:
            self.pixels[coords.y, coords.x] = coverage

    def clear(self) -> None:
        self.pixels.fill(0)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)


class SurfaceSink:
    """Write ``color`` with coverage as alpha into a per-pixel-alpha surface."""

    def __init__(self, surface: pygame.Surface, color: tuple[int, int, int]) -> None:
        self._surface = surface
        self._color = color

    def __call__(self, coords: Coords, coverage: int) -> None:
        if coverage == 0:
            return
        if self._surface.get_rect().collidepoint(coords.x, coords.y):
            r, g, b = self._color
            self._surface.set_at((coords.x, coords.y), (r, g, b, coverage))


class RecordingSink:
    """Keep every emitted pixel, in emission order."""

    def __init__(self) -> None:
        self.pixels: list[tuple[Coords, int]] = []

    def __call__(self, coords: Coords, coverage: int) -> None:
        self.pixels.append((coords, coverage))

    def __len__(self) -> int:
        return len(self.pixels)

    def coordinates(self) -> list[Coords]:
        return [coords for coords, _ in self.pixels]

    def bounds(self) -> tuple[int, int, int, int] | None:
        """Return ``(min_x, min_y, max_x, max_y)`` of emitted pixels."""

        if not self.pixels:
            return None
        xs = [coords.x for coords, _ in self.pixels]
        ys = [coords.y for coords, _ in self.pixels]
        return min(xs), min(ys), max(xs), max(ys)

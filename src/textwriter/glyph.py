from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Glyph:
    """A rasterized glyph.

    ``coverage`` is a ``(height, width)`` array of ``uint8`` alpha values.
    ``left_bearing`` and ``top_bearing`` are the signed offsets from the pen
    position to the bitmap's top-left corner; ``top_bearing`` is negative for
    bitmaps that rise above the baseline.
    """

    width: int
    height: int
    left_bearing: int
    top_bearing: int
    coverage: np.ndarray

    def __post_init__(self) -> None:
        if self.coverage.shape != (self.height, self.width):
            raise ValueError(
                f"Coverage shape {self.coverage.shape} does not match "
                f"{self.height}x{self.width} glyph"
            )

    @property
    def advance(self) -> int:
        return self.width + self.left_bearing

    def pixels(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(local_x, local_y, coverage)`` row-major, top to bottom."""

        for local_y in range(self.height):
            row = self.coverage[local_y]
            for local_x in range(self.width):
                yield local_x, local_y, int(row[local_x])

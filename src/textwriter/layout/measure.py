from __future__ import annotations

from textwriter.errors import BoundingBoxAbsent
from textwriter.geometry import Rect
from textwriter.layout.engine import NEWLINE, SPACE, SPACE_STAND_IN
from textwriter.providers.base import FontMetricsProvider
from textwriter.utilities.logging import get_logger

logger = get_logger(__name__)


class TextMeasurer:
    """Side-effect-free bounding box measurement.

    Boxes are queried at unit scale and then multiplied by the em scale for
    the current text size, truncating each coordinate toward zero. Querying
    at the final scale instead rounds outward and can differ by a pixel.
    """

    def __init__(self, provider: FontMetricsProvider, text_size: int) -> None:
        self._provider = provider
        self.text_size = text_size

    @property
    def text_size(self) -> int:
        return self._text_size

    @text_size.setter
    def text_size(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"text_size must be positive, got {value}")
        self._text_size = value

    def char_bbox(self, char: str) -> Rect:
        if char in (SPACE, NEWLINE):
            char = SPACE_STAND_IN

        codepoint = ord(char)
        try:
            unit_box = self._provider.unit_bbox(codepoint, 1.0, 1.0)
        except BoundingBoxAbsent:
            logger.debug("No outline for U+%04X, measuring as empty", codepoint)
            return Rect.empty()

        scale = self._provider.em_to_pixel_scale(float(self._text_size))
        return unit_box.scaled(scale)

    def string_extent(self, text: str) -> tuple[int, int]:
        """Return ``(width, height)`` of ``text`` laid out on a single line."""

        width = 0
        height = 0
        for char in text:
            box = self.char_bbox(char)
            width += box.width
            height = max(height, box.height)
        return width, height

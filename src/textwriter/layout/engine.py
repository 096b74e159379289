from __future__ import annotations

from dataclasses import replace
from typing import Callable

from textwriter.geometry import Coords
from textwriter.glyph import Glyph
from textwriter.layout.cursor import Cursor, LayoutConfig
from textwriter.providers.base import FontMetricsProvider
from textwriter.utilities.logging import get_logger

logger = get_logger(__name__)

PixelSink = Callable[[Coords, int], None]

NEWLINE = "\n"
SPACE = " "
# Many small fonts have no blank glyph, so spaces borrow the hyphen's advance.
SPACE_STAND_IN = "-"


class TextLayoutEngine:
    """Place glyphs one character at a time and stream their pixels to a sink.

    The engine owns the cursor. Every visible glyph emits all of its pixels,
    zero coverage included, as ``sink(Coords(x, y), coverage)`` with::

        x = pen_x + local_x + left_bearing
        y = pen_y + local_y + top_bearing + text_size

    A glyph that would reach ``wrap_at`` moves to the next line before any of
    its pixels are emitted. Newlines move to the next line without a glyph
    lookup; spaces advance by the stand-in glyph without drawing.

    ``RasterizationFailure`` from the provider propagates out of
    ``print_char``/``print_str``. The failing character emits nothing and
    leaves the cursor where the previous character put it.
    """

    def __init__(
        self,
        provider: FontMetricsProvider,
        config: LayoutConfig,
        cursor: Cursor | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._cursor = cursor or Cursor()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def offset(self) -> tuple[int, int]:
        return self._cursor.x, self._cursor.y

    def configure(self, text_size: int, wrap_at: int) -> None:
        self._config = LayoutConfig(text_size=text_size, wrap_at=wrap_at)
        logger.debug("Layout configured: text_size=%s wrap_at=%s", text_size, wrap_at)

    def set_text_size(self, text_size: int) -> None:
        self._config = replace(self._config, text_size=text_size)
        logger.debug("Text size set to %s", text_size)

    def set_wrap_at(self, wrap_at: int) -> None:
        self._config = replace(self._config, wrap_at=wrap_at)
        logger.debug("Wrap width set to %s", wrap_at)

    def set_offset(self, x: int, y: int) -> None:
        self._cursor.x = x
        self._cursor.y = y

    def print_char(self, char: str, sink: PixelSink) -> None:
        if char == NEWLINE:
            self._cursor.line_break(self._config.text_size)
            return

        is_space = char == SPACE
        glyph = self._rasterize(SPACE_STAND_IN if is_space else char)

        if is_space:
            self._cursor.advance(glyph.advance)
            return

        if self._cursor.x + glyph.width >= self._config.wrap_at:
            logger.debug(
                "Wrapping before %r at pen (%s, %s)",
                char,
                self._cursor.x,
                self._cursor.y,
            )
            self._cursor.line_break(self._config.text_size)

        self._emit(glyph, sink)
        self._cursor.advance(glyph.advance)

    def print_str(self, text: str, sink: PixelSink) -> None:
        for char in text:
            self.print_char(char, sink)

    def _rasterize(self, char: str) -> Glyph:
        glyph_id = self._provider.glyph_index(ord(char))
        return self._provider.rasterize(glyph_id, self._config.text_size)

    def _emit(self, glyph: Glyph, sink: PixelSink) -> None:
        origin_x = self._cursor.x + glyph.left_bearing
        origin_y = self._cursor.y + glyph.top_bearing + self._config.text_size
        for local_x, local_y, coverage in glyph.pixels():
            sink(Coords(origin_x + local_x, origin_y + local_y), coverage)

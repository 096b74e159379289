from __future__ import annotations

from os import PathLike

from textwriter.geometry import Rect
from textwriter.layout.cursor import LayoutConfig
from textwriter.layout.engine import PixelSink, TextLayoutEngine
from textwriter.layout.measure import TextMeasurer
from textwriter.providers.base import FontMetricsProvider
from textwriter.providers.truetype import FreeTypeFontProvider
from textwriter.utilities.env import (DEFAULT_TEXT_SIZE, DEFAULT_WRAP_AT,
                                      Configuration)
from textwriter.utilities.logging import get_logger

logger = get_logger(__name__)


class TextWriter:
    """One font, one cursor: layout and measurement sharing a text size."""

    def __init__(
        self,
        provider: FontMetricsProvider,
        text_size: int = DEFAULT_TEXT_SIZE,
        wrap_at: int = DEFAULT_WRAP_AT,
    ) -> None:
        self._provider = provider
        self._engine = TextLayoutEngine(
            provider, LayoutConfig(text_size=text_size, wrap_at=wrap_at)
        )
        self._measurer = TextMeasurer(provider, text_size)

    @classmethod
    def new(
        cls,
        font_data: bytes,
        text_size: int = DEFAULT_TEXT_SIZE,
        wrap_at: int = DEFAULT_WRAP_AT,
    ) -> "TextWriter":
        """Build a writer from in-memory font data; same as ``from_bytes``."""

        return cls.from_bytes(font_data, text_size, wrap_at)

    @classmethod
    def from_bytes(
        cls,
        font_data: bytes,
        text_size: int = DEFAULT_TEXT_SIZE,
        wrap_at: int = DEFAULT_WRAP_AT,
        *,
        face_index: int = 0,
    ) -> "TextWriter":
        """Build a writer from in-memory font data.

        Raises ``ConfigurationError`` when the data is not a usable font.
        """

        provider = FreeTypeFontProvider.from_bytes(font_data, face_index=face_index)
        return cls(provider, text_size, wrap_at)

    @classmethod
    def from_path(
        cls,
        path: str | PathLike[str],
        text_size: int = DEFAULT_TEXT_SIZE,
        wrap_at: int = DEFAULT_WRAP_AT,
        *,
        face_index: int = 0,
    ) -> "TextWriter":
        provider = FreeTypeFontProvider.from_path(path, face_index=face_index)
        return cls(provider, text_size, wrap_at)

    @classmethod
    def default(cls) -> "TextWriter":
        """Build a writer from the environment configuration."""

        return cls.from_path(
            Configuration.font_path(),
            Configuration.text_size(),
            Configuration.wrap_at(),
            face_index=Configuration.face_index(),
        )

    @property
    def provider(self) -> FontMetricsProvider:
        return self._provider

    @property
    def text_size(self) -> int:
        return self._engine.config.text_size

    @property
    def wrap_at(self) -> int:
        return self._engine.config.wrap_at

    @property
    def offset(self) -> tuple[int, int]:
        return self._engine.offset

    def configure(self, text_size: int, wrap_at: int) -> None:
        self._engine.configure(text_size, wrap_at)
        self._measurer.text_size = text_size

    def set_text_size(self, text_size: int) -> None:
        self._engine.set_text_size(text_size)
        self._measurer.text_size = text_size

    def set_wrap_at(self, wrap_at: int) -> None:
        self._engine.set_wrap_at(wrap_at)

    def set_offset(self, x: int, y: int) -> None:
        self._engine.set_offset(x, y)

    def print_char(self, char: str, sink: PixelSink) -> None:
        self._engine.print_char(char, sink)

    def print_str(self, text: str, sink: PixelSink) -> None:
        self._engine.print_str(text, sink)

    def char_bbox(self, char: str) -> Rect:
        return self._measurer.char_bbox(char)

    def string_extent(self, text: str) -> tuple[int, int]:
        return self._measurer.string_extent(text)

    aabb_char = char_bbox
    width_height = string_extent

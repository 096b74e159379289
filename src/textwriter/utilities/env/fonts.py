from pathlib import Path

import pygame

from textwriter.utilities.env.parsing import _env_int, _env_optional_str


class FontConfiguration:
    @classmethod
    def font_path(cls) -> Path:
        """Return the TrueType file to load, falling back to pygame's bundled font."""

        configured = _env_optional_str("TEXTWRITER_FONT_PATH")
        if configured is not None:
            return Path(configured).expanduser()
        return Path(pygame.__file__).resolve().parent / pygame.font.get_default_font()

    @classmethod
    def face_index(cls) -> int:
        return _env_int("TEXTWRITER_FACE_INDEX", default=0, minimum=0)

import os
from pathlib import Path

# Loggers are configured at import time; keep test runs off the filesystem.
os.environ.setdefault("TEXTWRITER_LOG_TO_FILE", "false")

import pygame
import pytest
from hypothesis import HealthCheck, settings

from textwriter.geometry import Rect
from textwriter.layout import LayoutConfig, TextLayoutEngine
from textwriter.providers import FixedGlyphMetrics, FixedMetricsProvider

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

TEXT_SIZE = 10
WRAP_AT = 100

# Glyph table used across the layout suites. Widths differ per character so
# placement mistakes show up as wrong coordinates.
GLYPHS = {
    "-": FixedGlyphMetrics(
        width=4,
        height=1,
        left_bearing=1,
        top_bearing=-4,
        unit_box=Rect(50, -300, 450, -200),
    ),
    "a": FixedGlyphMetrics(
        width=3,
        height=2,
        left_bearing=1,
        top_bearing=-2,
        coverage=bytes([0, 10, 20, 30, 40, 50]),
        unit_box=Rect(40, -500, 340, 10),
    ),
    "b": FixedGlyphMetrics(
        width=2,
        height=3,
        left_bearing=0,
        top_bearing=-3,
        unit_box=Rect(0, -700, 200, 0),
    ),
    "T": FixedGlyphMetrics(
        width=5,
        height=4,
        left_bearing=2,
        top_bearing=-4,
        unit_box=Rect(20, -1200, 520, 0),
    ),
    "W": FixedGlyphMetrics(width=150, height=2, left_bearing=0, top_bearing=-2),
    "j": FixedGlyphMetrics(
        width=2,
        height=2,
        left_bearing=-3,
        top_bearing=1,
        unit_box=Rect(-30, -300, 170, 150),
    ),
}


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture()
def provider() -> FixedMetricsProvider:
    return FixedMetricsProvider(GLYPHS)


@pytest.fixture()
def engine(provider: FixedMetricsProvider) -> TextLayoutEngine:
    return TextLayoutEngine(provider, LayoutConfig(text_size=TEXT_SIZE, wrap_at=WRAP_AT))


@pytest.fixture(scope="session")
def font_path() -> Path:
    """TrueType font shipped inside the pygame wheel."""

    path = Path(pygame.__file__).resolve().parent / pygame.font.get_default_font()
    if not path.exists():
        pytest.skip("pygame was installed without its bundled font")
    return path

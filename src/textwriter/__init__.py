"""Lay text out as positioned glyph coverage for arbitrary pixel surfaces."""

import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from textwriter.errors import BoundingBoxAbsent as BoundingBoxAbsent
from textwriter.errors import ConfigurationError as ConfigurationError
from textwriter.errors import RasterizationFailure as RasterizationFailure
from textwriter.errors import TextWriterError as TextWriterError
from textwriter.geometry import Coords as Coords
from textwriter.geometry import Rect as Rect
from textwriter.glyph import Glyph as Glyph
from textwriter.layout import LayoutConfig as LayoutConfig
from textwriter.layout import TextLayoutEngine as TextLayoutEngine
from textwriter.layout import TextMeasurer as TextMeasurer
from textwriter.providers import FontMetricsProvider as FontMetricsProvider
from textwriter.writer import TextWriter as TextWriter

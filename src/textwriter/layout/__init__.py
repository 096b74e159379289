from textwriter.layout.cursor import Cursor as Cursor
from textwriter.layout.cursor import LayoutConfig as LayoutConfig
from textwriter.layout.engine import PixelSink as PixelSink
from textwriter.layout.engine import TextLayoutEngine as TextLayoutEngine
from textwriter.layout.measure import TextMeasurer as TextMeasurer

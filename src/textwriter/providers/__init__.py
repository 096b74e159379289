from textwriter.providers.base import FontMetricsProvider as FontMetricsProvider
from textwriter.providers.fixed import FixedGlyphMetrics as FixedGlyphMetrics
from textwriter.providers.fixed import \
    FixedMetricsProvider as FixedMetricsProvider
from textwriter.providers.truetype import \
    FreeTypeFontProvider as FreeTypeFontProvider

from textwriter.utilities.env.fonts import FontConfiguration
from textwriter.utilities.env.layout import LayoutConfiguration


class Configuration(
    LayoutConfiguration,
    FontConfiguration,
):
    """Aggregate environment configuration helpers."""

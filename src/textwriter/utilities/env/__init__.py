"""Environment configuration helpers."""

from textwriter.utilities.env.config import Configuration as Configuration
from textwriter.utilities.env.layout import \
    DEFAULT_TEXT_SIZE as DEFAULT_TEXT_SIZE
from textwriter.utilities.env.layout import DEFAULT_WRAP_AT as DEFAULT_WRAP_AT

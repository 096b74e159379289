class TextWriterError(Exception):
    """Base class for every error raised by textwriter."""


class ConfigurationError(TextWriterError):
    """Font data could not be parsed or its metrics are unusable."""


class RasterizationFailure(TextWriterError):
    """A glyph could not be rendered at the requested pixel size."""

    def __init__(self, glyph_id: int, pixel_size: int, reason: str = "") -> None:
        self.glyph_id = glyph_id
        self.pixel_size = pixel_size
        message = f"Failed to render glyph {glyph_id} at {pixel_size}px"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class BoundingBoxAbsent(TextWriterError):
    """A codepoint has no outline to measure."""

    def __init__(self, codepoint: int) -> None:
        self.codepoint = codepoint
        super().__init__(f"No bounding box for codepoint U+{codepoint:04X}")

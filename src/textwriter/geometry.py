from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Coords:
    """Absolute pixel position handed to a sink.

    Negative values are possible when a glyph's bearing pushes it past the
    surface origin; sinks decide whether to clip.
    """

    x: int
    y: int


@dataclass(slots=True, frozen=True)
class Rect:
    """Axis-aligned bounding box in pixel space, y growing downwards."""

    x0: int
    y0: int
    x1: int
    y1: int

    @staticmethod
    def empty() -> "Rect":
        return Rect(0, 0, 0, 0)

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def scaled(self, factor: float) -> "Rect":
        """Multiply every coordinate by ``factor`` and truncate toward zero."""

        return Rect(
            x0=int(self.x0 * factor),
            y0=int(self.y0 * factor),
            x1=int(self.x1 * factor),
            y1=int(self.y1 * factor),
        )

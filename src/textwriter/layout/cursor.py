from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Pen position of the next glyph, in pixels."""

    x: int = 0
    y: int = 0

    def line_break(self, line_height: int) -> None:
        self.x = 0
        self.y += line_height

    def advance(self, amount: int) -> None:
        # A negative advance can only rewind to the start of the line.
        self.x = max(0, self.x + amount)


@dataclass(slots=True, frozen=True)
class LayoutConfig:
    text_size: int
    wrap_at: int

    def __post_init__(self) -> None:
        if self.text_size <= 0:
            raise ValueError(f"text_size must be positive, got {self.text_size}")
        if self.wrap_at < 0:
            raise ValueError(f"wrap_at must be non-negative, got {self.wrap_at}")

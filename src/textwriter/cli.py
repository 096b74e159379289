"""Command line helpers for previewing and measuring text."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from textwriter.errors import ConfigurationError, RasterizationFailure
from textwriter.sinks import CoverageFramebuffer, RecordingSink
from textwriter.utilities.env import Configuration
from textwriter.utilities.logging import get_logger
from textwriter.writer import TextWriter

logger = get_logger(__name__)

app = typer.Typer(help="Lay text out into glyph coverage.")


def _build_writer(font: Path | None, size: int | None, wrap_at: int | None) -> TextWriter:
    try:
        return TextWriter.from_path(
            font or Configuration.font_path(),
            size if size is not None else Configuration.text_size(),
            wrap_at if wrap_at is not None else Configuration.wrap_at(),
            face_index=Configuration.face_index(),
        )
    except ConfigurationError as error:
        logger.error("Font could not be loaded: %s", error)
        raise typer.Exit(code=1) from error


@app.command(name="render")
def render_command(
    text: Annotated[str, typer.Argument(help="Text to lay out; \\n starts a new line.")],
    output: Annotated[Path, typer.Option("--output", "-o", help="PNG file to write.")],
    font: Annotated[
        Path | None, typer.Option("--font", help="TrueType font file.")
    ] = None,
    size: Annotated[
        int | None, typer.Option("--size", min=1, help="Em size in pixels.")
    ] = None,
    wrap_at: Annotated[
        int | None, typer.Option("--wrap-at", min=0, help="Wrap width in pixels.")
    ] = None,
    width: Annotated[
        int | None, typer.Option("--width", min=1, help="Image width; defaults to fit the text.")
    ] = None,
    height: Annotated[
        int | None, typer.Option("--height", min=1, help="Image height; defaults to fit the text.")
    ] = None,
) -> None:
    """Render TEXT into a greyscale PNG."""

    writer = _build_writer(font, size, wrap_at)
    text = text.replace("\\n", "\n")

    recording = RecordingSink()
    try:
        writer.print_str(text, recording)
    except RasterizationFailure as error:
        logger.error("Rendering stopped: %s", error)
        raise typer.Exit(code=1) from error

    bounds = recording.bounds()
    _, _, max_x, max_y = bounds if bounds is not None else (0, 0, 0, 0)
    image_width = width or max(max_x + 1, 1)
    image_height = height or max(max_y + 1, 1)
    framebuffer = CoverageFramebuffer(image_width, image_height)
    for coords, coverage in recording.pixels:
        framebuffer(coords, coverage)

    framebuffer.to_image().save(output)
    typer.echo(f"Wrote {image_width}x{image_height} image to {output}")


@app.command(name="measure")
def measure_command(
    text: Annotated[str, typer.Argument(help="Text to measure on a single line.")],
    font: Annotated[
        Path | None, typer.Option("--font", help="TrueType font file.")
    ] = None,
    size: Annotated[
        int | None, typer.Option("--size", min=1, help="Em size in pixels.")
    ] = None,
) -> None:
    """Print the width and height of TEXT without wrapping."""

    writer = _build_writer(font, size, None)
    width, height = writer.string_extent(text)
    typer.echo(f"{width} {height}")


def main() -> None:
    """Entry-point used by ``pyproject.toml``."""

    app()


if __name__ == "__main__":
    main()

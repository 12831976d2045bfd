"""CLI application entry point for pathsketch.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathsketch import __version__
from pathsketch.cli.output import (
    console,
    print_error,
    print_header,
    print_hits,
    print_shape_table,
    print_sketch_info,
    print_step,
    print_success,
)
from pathsketch.config import LoggingConfig, PathsketchSettings
from pathsketch.core import PathEditor
from pathsketch.domain import Path as ShapePath
from pathsketch.domain import Shape
from pathsketch.exceptions import PathsketchError, SketchLoadError, SketchSaveError
from pathsketch.geometry import Point
from pathsketch.io import SketchReader, SketchWriter
from pathsketch.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathsketch",
    help="Inspect and edit vector sketch documents.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pathsketch[/bold blue] v{__version__}")
        raise typer.Exit()


def _parse_point(text: str) -> Point:
    """Parse "X,Y" into a Point."""
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError as e:
        raise typer.BadParameter(f"Expected X,Y but got '{text}'") from e
    return Point(x, y)


def _parse_factor(text: str) -> float | Point:
    """Parse a uniform factor "F" or per-axis factors "FX,FY"."""
    if "," in text:
        return _parse_point(text)
    try:
        return float(text)
    except ValueError as e:
        raise typer.BadParameter(f"Expected a number or FX,FY but got '{text}'") from e


def _settings(ctx: typer.Context) -> PathsketchSettings:
    if isinstance(ctx.obj, PathsketchSettings):
        return ctx.obj
    return PathsketchSettings()


def _load_shapes(sketch: Path) -> list[Shape]:
    """Load a sketch, turning load errors into a clean CLI exit."""
    try:
        return SketchReader(sketch).load()
    except SketchLoadError as e:
        print_error(f"Could not load sketch: {e.reason}", details=str(sketch))
        raise typer.Exit(code=1) from e


def _save_shapes(shapes: list[Shape], output: Path) -> None:
    try:
        SketchWriter(output).save(shapes)
    except SketchSaveError as e:
        print_error(f"Could not save sketch: {e.reason}", details=str(output))
        raise typer.Exit(code=1) from e


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect and edit vector sketch documents."""
    settings = PathsketchSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


@app.command()
def show(
    ctx: typer.Context,
    sketch: Annotated[Path, typer.Argument(help="Sketch document (JSON)", show_default=False)],
) -> None:
    """List the shapes in a sketch with their path commands."""
    settings = _settings(ctx)
    shapes = _load_shapes(sketch)

    print_header(__version__)
    print_sketch_info(str(sketch), len(shapes))
    if shapes:
        print_step("Shapes")
        print_shape_table(shapes, settings.geometry.precision)


@app.command()
def hit(
    ctx: typer.Context,
    sketch: Annotated[Path, typer.Argument(help="Sketch document (JSON)", show_default=False)],
    x: Annotated[float, typer.Argument(help="Query point X")],
    y: Annotated[float, typer.Argument(help="Query point Y")],
) -> None:
    """Find the nearest outline point of every shape to (X, Y)."""
    settings = _settings(ctx)
    shapes = _load_shapes(sketch)
    at = Point(x, y)

    hits = [shape.hit_test(at, settings.geometry) for shape in shapes]
    print_step(f"Nearest points to ({x:g}, {y:g})")
    print_hits(shapes, hits, settings.geometry.precision)


@app.command()
def split(
    ctx: typer.Context,
    sketch: Annotated[Path, typer.Argument(help="Sketch document (JSON)", show_default=False)],
    index: Annotated[int, typer.Argument(help="Index of the path to edit", min=0)],
    x: Annotated[float, typer.Argument(help="Point X near the edge to split")],
    y: Annotated[float, typer.Argument(help="Point Y near the edge to split")],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-edited.json)",
        ),
    ] = None,
) -> None:
    """Insert a vertex into a path at the outline point nearest to (X, Y)."""
    settings = _settings(ctx)
    shapes = _load_shapes(sketch)

    if index >= len(shapes):
        print_error(f"No shape at index {index}", details=f"The sketch has {len(shapes)} shapes.")
        raise typer.Exit(code=1)

    path = shapes[index]
    if not isinstance(path, ShapePath):
        print_error(f"Shape {index} is a {path.type_name}, not a Path")
        raise typer.Exit(code=1)

    editor = PathEditor(path, settings)
    found = editor.hit(Point(x, y))
    if found is None:
        print_error(f"Path {index} has no edges to split")
        raise typer.Exit(code=1)

    try:
        vertex = editor.edit(found.point)
    except PathsketchError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    output_path = output or SketchWriter.get_edited_path(sketch)
    _save_shapes(shapes, output_path)
    print_success(
        f"Split {found.edge.type_name if found.edge else 'edge'} at "
        f"({vertex.position.x:g}, {vertex.position.y:g})",
        output_path=str(output_path),
    )


@app.command()
def scale(
    sketch: Annotated[Path, typer.Argument(help="Sketch document (JSON)", show_default=False)],
    factor: Annotated[str, typer.Argument(help="Scale factor F or per-axis factors FX,FY")],
    epicenter: Annotated[
        str | None,
        typer.Option(
            "--epicenter",
            "-e",
            help="Fixed point X,Y (default: each shape's own anchor)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-edited.json)",
        ),
    ] = None,
) -> None:
    """Scale every shape in a sketch."""
    scale_by = _parse_factor(factor)
    center = _parse_point(epicenter) if epicenter is not None else None
    shapes = _load_shapes(sketch)

    for shape in shapes:
        shape.scale(scale_by, center)

    output_path = output or SketchWriter.get_edited_path(sketch)
    _save_shapes(shapes, output_path)
    print_success(f"Scaled {len(shapes)} shapes by {factor}", output_path=str(output_path))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathsketch.domain import HitResult, Path, Shape
from pathsketch.geometry import Point, format_number

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pathsketch[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_sketch_info(sketch_path: str, shape_count: int) -> None:
    """Print sketch document information.

    Args:
        sketch_path: Path to the sketch document
        shape_count: Number of shapes in the document
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(sketch_path)
    console.print(line)
    plural = "shape" if shape_count == 1 else "shapes"
    console.print(f"  {shape_count} {plural}")


def _describe(shape: Shape) -> str:
    if isinstance(shape, Path):
        state = "closed" if shape.closed else "open"
        return f"{len(shape)} vertices {SYM_DOT} {state}"
    return "-"


def _xy(point: Point, precision: int) -> str:
    return f"({format_number(point.x, precision)}, {format_number(point.y, precision)})"


def print_shape_table(shapes: list[Shape], precision: int = 6) -> None:
    """Print one row per shape with its path commands.

    Args:
        shapes: Shapes to list
        precision: Decimal places for coordinates
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Structure")
    table.add_column("Path", overflow="fold")

    for index, shape in enumerate(shapes):
        table.add_row(
            str(index),
            shape.type_name,
            _describe(shape),
            shape.to_path_commands(precision),
        )

    console.print(table)


def print_hits(shapes: list[Shape], hits: list[HitResult | None], precision: int = 6) -> None:
    """Print the nearest outline point of each shape.

    Args:
        shapes: Shapes that were hit-tested
        hits: Hit result per shape (None for shapes without an outline)
        precision: Decimal places for coordinates
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Nearest")
    table.add_column("Distance", justify="right")
    table.add_column("Edge")

    for index, (shape, hit) in enumerate(zip(shapes, hits, strict=True)):
        if hit is None:
            table.add_row(str(index), shape.type_name, "no outline", "-", "-")
            continue
        table.add_row(
            str(index),
            shape.type_name,
            _xy(hit.point, precision),
            format_number(hit.distance, precision),
            hit.edge.type_name if hit.edge is not None else "-",
        )

    console.print(table)


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary of what was done
        output_path: File written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

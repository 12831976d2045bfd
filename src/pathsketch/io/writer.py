"""Sketch writer for saving shape documents.

This module provides the SketchWriter class for writing shapes to JSON
sketch documents.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pathsketch.domain import Shape, encode
from pathsketch.exceptions import SketchSaveError
from pathsketch.io.reader import SKETCH_FORMAT_VERSION


def shapes_to_document(shapes: Iterable[Shape]) -> dict[str, Any]:
    """Build a sketch document from shapes.

    Args:
        shapes: Shapes in drawing order

    Returns:
        JSON-ready document
    """
    return {
        "version": SKETCH_FORMAT_VERSION,
        "shapes": [encode(shape) for shape in shapes],
    }


class SketchWriter:
    """Writes shapes to a sketch document.

    Example:
        writer = SketchWriter(Path("drawing.json"))
        writer.save([path, ellipse])
    """

    def __init__(self, output_path: Path, indent: int | None = 2) -> None:
        """Initialize the sketch writer.

        Args:
            output_path: Path where the document will be saved
            indent: JSON indentation (None for compact output)
        """
        self._output_path = output_path
        self._indent = indent

    def save(self, shapes: Iterable[Shape]) -> None:
        """Save shapes to the output path.

        Raises:
            SketchSaveError: If the file cannot be written
        """
        text = json.dumps(shapes_to_document(shapes), indent=self._indent)
        try:
            self._output_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise SketchSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_edited_path(input_path: Path) -> Path:
        """Generate output path for an edited copy of a sketch.

        Converts: drawing.json -> drawing-edited.json

        Args:
            input_path: Original sketch path

        Returns:
            Path with -edited suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-edited{input_path.suffix}"

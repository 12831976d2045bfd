"""Sketch reader for loading shape documents.

This module provides the SketchReader class for loading JSON sketch
documents into domain shapes.
"""

import json
from pathlib import Path

from pathsketch.domain import Shape, decode
from pathsketch.exceptions import SerializationError, SketchLoadError

SKETCH_FORMAT_VERSION = 1


def shapes_from_document(document: object) -> list[Shape]:
    """Decode the shapes of a parsed sketch document.

    Args:
        document: Parsed JSON document

    Returns:
        Shapes in document order

    Raises:
        SerializationError: If the document structure is invalid
    """
    if not isinstance(document, dict):
        raise SerializationError("Sketch document must be a JSON object")

    version = document.get("version")
    if version != SKETCH_FORMAT_VERSION:
        raise SerializationError(f"Unsupported sketch version: {version!r}")

    shapes = document.get("shapes")
    if not isinstance(shapes, list):
        raise SerializationError("Sketch document has no 'shapes' list")

    return [decode(item, Shape) for item in shapes]


class SketchReader:
    """Loads sketch documents.

    Example:
        with SketchReader(Path("drawing.json")) as reader:
            for shape in reader.shapes:
                print(shape.to_path_commands())
    """

    def __init__(self, sketch_path: Path) -> None:
        """Initialize the sketch reader.

        Args:
            sketch_path: Path to the JSON sketch document
        """
        self._sketch_path = sketch_path
        self._shapes: list[Shape] | None = None

    def load(self) -> list[Shape]:
        """Load and decode the document.

        Returns:
            Shapes in document order

        Raises:
            SketchLoadError: If the file is missing, not UTF-8 JSON, or holds
                invalid shape data
        """
        if not self._sketch_path.exists():
            raise SketchLoadError(str(self._sketch_path), "file not found")

        try:
            document = json.loads(self._sketch_path.read_text(encoding="utf-8"))
            self._shapes = shapes_from_document(document)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, SerializationError) as e:
            raise SketchLoadError(str(self._sketch_path), str(e)) from e

        return self._shapes

    @property
    def shapes(self) -> list[Shape]:
        """Loaded shapes.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._shapes is None:
            raise RuntimeError("Sketch not loaded. Call load() first.")
        return self._shapes

    def close(self) -> None:
        """Drop the loaded shapes."""
        self._shapes = None

    def __enter__(self) -> "SketchReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

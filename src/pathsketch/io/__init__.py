"""Sketch document I/O layer for pathsketch.

This module handles reading and writing JSON sketch documents. A document
stores a format version and a list of shapes in their tagged serialized
form.

Key classes:
- SketchReader: Load documents into domain shapes
- SketchWriter: Save domain shapes
"""

from pathsketch.io.reader import SKETCH_FORMAT_VERSION, SketchReader, shapes_from_document
from pathsketch.io.writer import SketchWriter, shapes_to_document

__all__ = [
    "SKETCH_FORMAT_VERSION",
    "SketchReader",
    "SketchWriter",
    "shapes_from_document",
    "shapes_to_document",
]

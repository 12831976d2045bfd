"""Pathsketch - Editable 2D vector path geometry.

Pathsketch models the shapes an interactive vector sketching tool works with:
open and closed multi-segment paths built from straight and quadratic Bezier
edges, axis-aligned ellipses and parallelograms. Paths can be edited
structurally (vertices inserted, removed or split into edges, edges bent,
paths welded shut), hit-tested against a query point, scaled and serialized
to a lossless JSON form.

Example:
    $ pathsketch show drawing.json

This prints every shape stored in drawing.json with its SVG path commands.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]

"""Command-line interface for pathsketch.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Shape listings with rendered path commands
- Hit-testing a point against every shape
- Splitting path edges and scaling whole sketches
- Detailed error reporting
"""

from pathsketch.cli.app import cli, main

__all__ = ["cli", "main"]

"""Editing services for pathsketch.

This module contains the session layer between pointer-level requests and
the structural Path operations:

- PathEditor: hit / edit / bend / move / delete gestures on one path,
  with structured logging and edit statistics
"""

from pathsketch.core.editor import PathEditor

__all__ = [
    "PathEditor",
]

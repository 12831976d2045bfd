"""Logging utilities for Pathsketch."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from pathsketch.geometry import Point

_FILE_HANDLER = "pathsketch-file"
_CONSOLE_HANDLER = "pathsketch-console"


@dataclass
class EditStats:
    """Statistics from an editing session."""

    vertices_added: int = 0
    vertices_removed: int = 0
    vertices_moved: int = 0
    edges_bent: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def edit_count(self) -> int:
        """Total number of successful edits."""
        return (
            self.vertices_added
            + self.vertices_removed
            + self.vertices_moved
            + self.edges_bent
        )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces our handlers instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_FILE_HANDLER, _CONSOLE_HANDLER):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathsketch")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def _xy(point: Point) -> list[float]:
    return [round(point.x, 3), round(point.y, 3)]


class EditLogger:
    """Logger for tracking path edits and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = EditStats()

    def log_hit(self, query: Point, point: Point, distance: float, kind: str) -> None:
        """Log an outline hit."""
        self._logger.debug(
            "Outline hit",
            query=_xy(query),
            at=_xy(point),
            distance=round(distance, 3),
            edge=kind,
        )

    def log_vertex_added(self, position: Point, direction: str, split: bool) -> None:
        """Log a new vertex."""
        self._logger.info(
            "Vertex added",
            at=_xy(position),
            direction=direction,
            split=split,
        )
        self._stats.vertices_added += 1

    def log_vertex_removed(self, position: Point) -> None:
        """Log a removed vertex."""
        self._logger.info("Vertex removed", at=_xy(position))
        self._stats.vertices_removed += 1

    def log_vertex_moved(self, old: Point, new: Point) -> None:
        """Log a moved vertex."""
        self._logger.debug("Vertex moved", old=_xy(old), new=_xy(new))
        self._stats.vertices_moved += 1

    def log_edge_bent(self, control: Point, replaced: bool) -> None:
        """Log a curve control change."""
        self._logger.info("Edge bent", control=_xy(control), replaced=replaced)
        self._stats.edges_bent += 1

    def log_edit_error(self, operation: str, error: Exception) -> None:
        """Log a failed edit."""
        self._logger.error(
            "Edit failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((operation, str(error)))

    @property
    def stats(self) -> EditStats:
        """Get current edit statistics."""
        return self._stats

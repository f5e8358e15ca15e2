from __future__ import annotations


class GridPathError(Exception):
    """Base class for every error raised by gridpath."""


class InvalidInput(GridPathError, ValueError):
    """Bad grid dimensions, endpoints or text grid."""


class InternalInconsistency(GridPathError, RuntimeError):
    """The predecessor chain does not lead back to the start."""

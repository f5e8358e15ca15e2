from .errors import GridPathError, InternalInconsistency, InvalidInput
from .grid import Grid
from .search import DIRECTIONS, Found, NotFound, SearchCursor, StepEvent, search

__all__ = [
    "DIRECTIONS",
    "Found",
    "Grid",
    "GridPathError",
    "InternalInconsistency",
    "InvalidInput",
    "NotFound",
    "SearchCursor",
    "StepEvent",
    "search",
]

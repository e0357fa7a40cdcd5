from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""ValidationError model: one detected defect in cart content.

Validation errors are plain records, never exceptions. Validators create them
and collect them in detection order (header first, then body rows top to
bottom, left to right within a row).
"""

__all__ = [
    "ErrorType",
    "ValidationError",
    "NO_COLUMN",
]

# ROW errors concern the whole row, not a single cell
NO_COLUMN = -1


class ErrorType(Enum):
    HEADER = "header"  # Wrong column name
    ROW = "row"  # Wrong cell count
    CELL = "cell"  # Wrong value type/shape


@dataclass(frozen=True)
class ValidationError:
    """Structured description of a single validation defect.

    Attributes:
        type: Error classification (HEADER / ROW / CELL)
        row: Line index in the content (header = 0, first body row = 1)
        column: 0-based cell index, NO_COLUMN (-1) for ROW errors
        message: Human readable description
    """
    type: ErrorType
    row: int
    column: int
    message: str

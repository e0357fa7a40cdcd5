from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from .validation_error import NO_COLUMN, ValidationError

"""ErrorRecord model for the structured error log.

An ErrorRecord is a ValidationError bound to the file it was found in, plus a
UTC timestamp. row=-1 is used as a sentinel for file-level failures where no
specific row applies (e.g. the file could not be read).
"""

__all__ = [
    "ErrorRecord",
    "FILE_LEVEL_ROW",
]

FILE_LEVEL_ROW = -1


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: CSV filename being processed
        row: Line index in the file. -1 for file-level errors
        column: Cell index, -1 when not applicable
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Error description
    """
    timestamp: str  # ISO8601 UTC
    file: str
    row: int
    column: int
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, row: int, column: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=row,
            column=column,
            error_type=error_type,
            message=message,
        )

    @staticmethod
    def from_validation_error(file: str, error: ValidationError) -> ErrorRecord:
        """Bind a ValidationError to a file name.

        error_type becomes e.g. "HEADER_ERROR" / "ROW_ERROR" / "CELL_ERROR".
        """
        return ErrorRecord.create(
            file=file,
            row=error.row,
            column=error.column,
            error_type=f"{error.type.name}_ERROR",
            message=error.message,
        )

    @staticmethod
    def file_level(file: str, error_type: str, message: str) -> ErrorRecord:
        return ErrorRecord.create(file, FILE_LEVEL_ROW, NO_COLUMN, error_type, message)

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format.

        Returns:
            JSON string representation without extra keys
        """
        return json.dumps(asdict(self), ensure_ascii=False)

from __future__ import annotations

from ..models.schema_config import CART_COLUMNS, DEFAULT_DELIMITER
from ..models.validation_error import ValidationError
from .row import validate_body_row, validate_header_row

"""Content-level validation orchestrator.

Splits raw content into header + body rows and accumulates every error found.
Never raises; an empty list means the content is valid.
"""

__all__ = [
    "split_lines",
    "split_cells",
    "validate",
]


def split_lines(content: str) -> list[str]:
    """Split content on newlines.

    A trailing "\\r" is dropped from each line, and the empty line produced by
    a final newline is ignored.
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def split_cells(line: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    return line.split(delimiter)


def validate(content: str, delimiter: str = DEFAULT_DELIMITER) -> list[ValidationError]:
    lines = split_lines(content)
    header, body = lines[0], lines[1:]

    errors = validate_header_row(split_cells(header, delimiter), CART_COLUMNS)
    for row_index, line in enumerate(body, start=1):
        errors.extend(validate_body_row(split_cells(line, delimiter), row_index, CART_COLUMNS))
    return errors

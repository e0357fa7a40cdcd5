from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from ..files.reader import DEFAULT_ENCODING
from ..files.reader import read_file as _read_file
from ..models.cart import Cart, CartItem
from ..models.schema_config import DEFAULT_DELIMITER
from ..models.validation_error import ErrorType, ValidationError
from ..parsing.line_parser import parse_line as _parse_line
from ..validation.validator import split_lines
from ..validation.validator import validate as _validate
from .aggregator import calc_total as _calc_total

"""Cart parser facade: validate, then parse, then aggregate.

Processing always goes START -> VALIDATED -> PARSED -> DONE, or
START -> FAILED when validation reports anything. Parsing never runs on content
that has not passed validation as a whole; `validate` may be called on its own
for detailed diagnostics.
"""

__all__ = [
    "VALIDATION_FAILED_MESSAGE",
    "ValidationFailure",
    "DetailedValidationFailure",
    "CartParser",
]

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed!"


class ValidationFailure(Exception):
    """Raised by parse when the content has at least one validation error."""

    def __init__(self, message: str = VALIDATION_FAILED_MESSAGE) -> None:
        super().__init__(message)


class DetailedValidationFailure(ValidationFailure):
    """ValidationFailure that also carries the detected errors (opt-in)."""

    def __init__(self, errors: list[ValidationError], message: str = VALIDATION_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.errors = errors


class CartParser:
    """Parse cart CSV content into a Cart.

    `read_file` is the only I/O collaborator. Pass one to the constructor, or
    replace the attribute on an instance, to feed content without touching the
    disk.
    """

    ErrorType = ErrorType

    def __init__(
        self,
        read_file: Callable[[str | Path], str] | None = None,
        *,
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self.delimiter = delimiter
        self.encoding = encoding
        if read_file is not None:
            self.read_file = read_file

    def read_file(self, path: str | Path) -> str:
        return _read_file(path, encoding=self.encoding)

    def validate(self, content: str) -> list[ValidationError]:
        return _validate(content, self.delimiter)

    def parse_line(self, line: str) -> CartItem:
        return _parse_line(line, self.delimiter)

    def calc_total(self, items: Iterable[CartItem | Mapping[str, Any]]) -> float:
        return _calc_total(items)

    def parse(self, path: str | Path) -> Cart:
        """Read path and parse it. Raises ValidationFailure without error detail."""
        return self.parse_content(self.read_file(path))

    def parse_detailed(self, path: str | Path) -> Cart:
        """Like parse, but raises DetailedValidationFailure carrying the errors."""
        return self.parse_content(self.read_file(path), detailed=True)

    def parse_content(self, content: str, *, detailed: bool = False) -> Cart:
        errors = self.validate(content)
        if errors:
            logger.debug("validation failed: %d error(s)", len(errors))
            if detailed:
                raise DetailedValidationFailure(errors)
            raise ValidationFailure()

        body = split_lines(content)[1:]
        items = [self.parse_line(line) for line in body]
        total = self.calc_total(items)
        logger.debug("parsed %d item(s) total=%s", len(items), total)
        return Cart(items=items, total=total)

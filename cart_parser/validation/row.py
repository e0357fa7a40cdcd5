from __future__ import annotations

from collections.abc import Sequence

from ..models.schema_config import CART_COLUMNS, ColumnRule, SchemaColumn
from ..models.validation_error import NO_COLUMN, ErrorType, ValidationError
from .cell import validate_cell

"""Row-level validation: header names, body row arity and body cells.

Each row is checked on its own. A body row with the wrong cell count yields a
single ROW error and its cells are not inspected; other rows are unaffected.
"""

__all__ = [
    "validate_header_row",
    "validate_body_row",
    "MISSING_CELL",
]

HEADER_ROW_INDEX = 0

# Rendering of a header position that has no cell at all
MISSING_CELL = "undefined"


def _header_message(expected: str, actual: str) -> str:
    return f'Expected header to be named "{expected}" but received {actual}.'


def _row_message(expected_cells: int, actual_cells: int) -> str:
    return f"Expected row to have {expected_cells} cells but received {actual_cells}."


def _cell_message(rule: ColumnRule, raw_value: str) -> str:
    # nonempty 違反は空白のみの値なので trim 後 ("") を表示
    shown = raw_value.strip() if rule is ColumnRule.STRING_NONEMPTY else raw_value
    return f'Expected cell to be a {rule.value} but received "{shown}".'


def validate_header_row(
    cells: Sequence[str],
    columns: Sequence[SchemaColumn] = CART_COLUMNS,
) -> list[ValidationError]:
    """Check every expected header position against its column name.

    A missing position renders as "undefined" and always mismatches, so a
    short header surfaces as one HEADER error per missing column.
    """
    errors: list[ValidationError] = []
    for index, column in enumerate(columns):
        actual = cells[index] if index < len(cells) else None
        if actual is not None and actual.strip() == column.name:
            continue
        errors.append(
            ValidationError(
                type=ErrorType.HEADER,
                row=HEADER_ROW_INDEX,
                column=index,
                message=_header_message(column.name, MISSING_CELL if actual is None else actual),
            )
        )
    return errors


def validate_body_row(
    cells: Sequence[str],
    row_index: int,
    columns: Sequence[SchemaColumn] = CART_COLUMNS,
) -> list[ValidationError]:
    """Check arity, then every cell against its column rule."""
    if len(cells) != len(columns):
        return [
            ValidationError(
                type=ErrorType.ROW,
                row=row_index,
                column=NO_COLUMN,
                message=_row_message(len(columns), len(cells)),
            )
        ]

    errors: list[ValidationError] = []
    for index, (raw_value, column) in enumerate(zip(cells, columns, strict=True)):
        if validate_cell(raw_value, column.rule):
            continue
        errors.append(
            ValidationError(
                type=ErrorType.CELL,
                row=row_index,
                column=index,
                message=_cell_message(column.rule, raw_value),
            )
        )
    return errors

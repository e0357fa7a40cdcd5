from __future__ import annotations

from cart_parser.models.validation_error import NO_COLUMN, ErrorType
from cart_parser.validation.row import validate_body_row, validate_header_row

"""Unit tests for header / body row validation."""


def test_header_row_valid():
    assert validate_header_row(["Product name", "Price", "Quantity"]) == []


def test_header_row_tolerates_padding():
    assert validate_header_row([" Product name", "Price ", " Quantity "]) == []


def test_header_row_wrong_name_renders_raw_value_unquoted():
    errors = validate_header_row(["Product name", "Cost", "Quantity"])

    assert len(errors) == 1
    assert errors[0].type is ErrorType.HEADER
    assert errors[0].row == 0
    assert errors[0].column == 1
    assert errors[0].message == 'Expected header to be named "Price" but received Cost.'


def test_header_row_empty_name():
    errors = validate_header_row(["", "Price", "Quantity"])

    assert [e.message for e in errors] == ['Expected header to be named "Product name" but received .']


def test_header_row_missing_positions_render_as_undefined():
    errors = validate_header_row(["1"])

    assert [e.type for e in errors] == [ErrorType.HEADER] * 3
    assert [e.column for e in errors] == [0, 1, 2]
    assert errors[0].message == 'Expected header to be named "Product name" but received 1.'
    assert errors[1].message == 'Expected header to be named "Price" but received undefined.'
    assert errors[2].message == 'Expected header to be named "Quantity" but received undefined.'


def test_header_row_extra_cells_are_not_checked():
    assert validate_header_row(["Product name", "Price", "Quantity", "Notes"]) == []


def test_body_row_valid():
    assert validate_body_row(["some product name", "100.4", "10"], 1) == []


def test_body_row_wrong_arity_single_error():
    errors = validate_body_row(["some name", " 10"], 3)

    assert len(errors) == 1
    assert errors[0].type is ErrorType.ROW
    assert errors[0].row == 3
    assert errors[0].column == NO_COLUMN
    assert errors[0].message == "Expected row to have 3 cells but received 2."


def test_body_row_wrong_arity_suppresses_cell_checks():
    # every cell would also be invalid, only the ROW error is reported
    errors = validate_body_row(["", "-1", "x", "y"], 1)

    assert [e.type for e in errors] == [ErrorType.ROW]
    assert errors[0].message == "Expected row to have 3 cells but received 4."


def test_body_row_blank_name_message_shows_trimmed_value():
    errors = validate_body_row(["   ", "10", "5"], 1)

    assert len(errors) == 1
    assert errors[0].type is ErrorType.CELL
    assert errors[0].column == 0
    assert errors[0].message == 'Expected cell to be a nonempty string but received "".'


def test_body_row_negative_price():
    errors = validate_body_row(["some product name", "-15", "5"], 2)

    assert len(errors) == 1
    assert errors[0].row == 2
    assert errors[0].column == 1
    assert errors[0].message == 'Expected cell to be a positive number but received "-15".'


def test_body_row_multiple_cell_errors_left_to_right():
    errors = validate_body_row(["", "abc", "0"], 1)

    assert [e.column for e in errors] == [0, 1, 2]
    assert [e.type for e in errors] == [ErrorType.CELL] * 3
    assert errors[2].message == 'Expected cell to be a positive number but received "0".'

from __future__ import annotations

import math

from ..models.schema_config import ColumnRule
from ..parsing.numbers import to_number

"""Single-cell validation against a column rule.

Pure predicates: no side effects, no exceptions. The caller attaches row,
column and message context.
"""

__all__ = [
    "validate_cell",
    "is_nonempty_string",
    "is_positive_number",
]


def is_nonempty_string(raw_value: str) -> bool:
    return len(raw_value.strip()) > 0


def is_positive_number(raw_value: str) -> bool:
    value = to_number(raw_value)
    return not math.isnan(value) and value > 0


_RULE_CHECKS = {
    ColumnRule.STRING_NONEMPTY: is_nonempty_string,
    ColumnRule.POSITIVE_NUMBER: is_positive_number,
}


def validate_cell(raw_value: str, rule: ColumnRule) -> bool:
    """Return True when raw_value satisfies rule."""
    return _RULE_CHECKS[rule](raw_value)

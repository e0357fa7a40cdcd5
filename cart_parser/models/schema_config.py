from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Cart CSV schema definition.

The expected columns are declared once as an ordered table of (name, rule).
Header checks and cell checks both iterate this table, so adding a column
means adding one entry here.
"""

__all__ = [
    "ColumnRule",
    "SchemaColumn",
    "CART_COLUMNS",
    "DEFAULT_DELIMITER",
]

DEFAULT_DELIMITER = ","


class ColumnRule(Enum):
    """Validation rule applied to every body cell of a column."""
    STRING_NONEMPTY = "nonempty string"
    POSITIVE_NUMBER = "positive number"


@dataclass(frozen=True)
class SchemaColumn:
    name: str  # Exact header text
    rule: ColumnRule


CART_COLUMNS: tuple[SchemaColumn, ...] = (
    SchemaColumn("Product name", ColumnRule.STRING_NONEMPTY),
    SchemaColumn("Price", ColumnRule.POSITIVE_NUMBER),
    SchemaColumn("Quantity", ColumnRule.POSITIVE_NUMBER),
)

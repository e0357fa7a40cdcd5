from __future__ import annotations

import math
import uuid

from ..models.cart import CartItem
from ..models.schema_config import DEFAULT_DELIMITER
from .numbers import to_number

"""Body line -> CartItem conversion.

Meant to run on rows that already passed validation, but never raises on
malformed input: missing cells fall back to the literal "undefined" name and
NaN numbers.
"""

__all__ = [
    "parse_line",
    "new_item_id",
]

MISSING_NAME = "undefined"


def new_item_id() -> str:
    return str(uuid.uuid4())


def parse_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> CartItem:
    # 空行はセル無しとして扱う
    cells = line.split(delimiter) if line else []
    name = cells[0] if len(cells) > 0 else MISSING_NAME
    price = to_number(cells[1]) if len(cells) > 1 else math.nan
    quantity = to_number(cells[2]) if len(cells) > 2 else math.nan
    return CartItem(id=new_item_id(), name=name, price=price, quantity=quantity)

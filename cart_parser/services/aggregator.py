from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..models.cart import CartItem

"""Cart total aggregation."""

__all__ = [
    "calc_total",
]


def _price_and_quantity(item: CartItem | Mapping[str, Any]) -> tuple[float, float]:
    # 直列化済みカート (dict) も受け付ける
    if isinstance(item, Mapping):
        return item["price"], item["quantity"]
    return item.price, item.quantity


def calc_total(items: Iterable[CartItem | Mapping[str, Any]]) -> float:
    """Sum of price * quantity over items. NaN values propagate unchanged."""
    total = 0.0
    for item in items:
        price, quantity = _price_and_quantity(item)
        total += price * quantity
    return total

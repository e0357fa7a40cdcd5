from __future__ import annotations

from dataclasses import dataclass, field

"""Cart domain models.

CartItem is produced by the line parser from one body row; Cart wraps the
ordered items of a single parse call together with their aggregate total.
"""

__all__ = [
    "CartItem",
    "Cart",
]


@dataclass(frozen=True)
class CartItem:
    """One cart line item.

    price / quantity may be NaN when the source text is not numeric. That only
    happens when the line parser is called on content that skipped validation.
    """
    id: str  # uuid4 文字列 (呼び出し毎に新規生成)
    name: str
    price: float
    quantity: float


@dataclass(frozen=True)
class Cart:
    items: list[CartItem] = field(default_factory=list)
    total: float = 0.0

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.cart import Cart

"""Cart serialization helpers.

- cart_to_dict / write_cart_json: `{"items": [...], "total": n}` JSON output
- cart_to_frame: tabular view of the items (one row per item) for inspection
"""

__all__ = [
    "ITEM_COLUMNS",
    "cart_to_dict",
    "write_cart_json",
    "cart_to_frame",
]

ITEM_COLUMNS = ["id", "name", "price", "quantity"]


def cart_to_dict(cart: Cart) -> dict[str, Any]:
    return {
        "items": [asdict(item) for item in cart.items],
        "total": cart.total,
    }


def write_cart_json(cart: Cart, path: Path) -> Path:
    """Write cart as pretty-printed JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cart_to_dict(cart), ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return path


def cart_to_frame(cart: Cart) -> pd.DataFrame:
    """Return items as a DataFrame with an extra `amount` (price * quantity) column."""
    df = pd.DataFrame([asdict(item) for item in cart.items], columns=ITEM_COLUMNS)
    df["amount"] = df["price"] * df["quantity"]
    return df

from __future__ import annotations

import math
import re

"""Numeric-string conversion shared by the cell validator and the line parser.

Accepts plain decimal text with optional sign, fraction and exponent,
surrounded by optional whitespace. Everything else (blank text, thousands
separators, underscores, hex, words such as "inf"/"nan"/"undefined")
converts to NaN instead of raising.
"""

__all__ = [
    "to_number",
    "is_nan",
]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(raw: object) -> float:
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    if not isinstance(raw, str):
        return math.nan
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return math.nan
    return float(text)


def is_nan(value: float) -> bool:
    return isinstance(value, float) and math.isnan(value)

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from .cart import Cart
from .validation_error import ValidationError

"""CartFile domain model and FileStatus enum.

A CartFile is the processing context for one CSV file in a batch run, tracking
its status from discovery to success/failed.
"""


class FileStatus(Enum):
    """Status enum for CartFile processing lifecycle.

    State transitions: pending → processing → (success | failed)
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class CartFile:
    """Processing context for a single cart CSV file."""
    path: Path
    name: str
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: FileStatus = FileStatus.PENDING
    cart: Cart | None = None  # SUCCESS 時のみ
    errors: list[ValidationError] = field(default_factory=list)  # 行単位の検証エラー
    output_path: Path | None = None  # JSON 出力先 (output_directory 指定時)
    error: str | None = None  # Failure reason summary

    @property
    def item_count(self) -> int:
        return len(self.cart.items) if self.cart is not None else 0

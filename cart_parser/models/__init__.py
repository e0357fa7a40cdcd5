"""Domain models for the cart CSV parser.

This package contains the schema table, validation error records, cart models
and batch processing result models used throughout the application.
"""

from .cart import Cart, CartItem
from .cart_file import CartFile, FileStatus
from .error_record import ErrorRecord
from .processing_result import FileStat, ProcessingResult
from .schema_config import CART_COLUMNS, ColumnRule, SchemaColumn
from .validation_error import ErrorType, ValidationError

__all__ = [
    # Schema
    "CART_COLUMNS",
    "ColumnRule",
    "SchemaColumn",
    # Validation
    "ErrorType",
    "ValidationError",
    "ErrorRecord",
    # Cart
    "Cart",
    "CartItem",
    # Processing models
    "CartFile",
    "FileStatus",
    "FileStat",
    "ProcessingResult",
]

"""Shopping cart CSV parser: validate, parse and total cart files."""

from .models.cart import Cart, CartItem
from .models.validation_error import ErrorType, ValidationError
from .services.cart_parser import CartParser, DetailedValidationFailure, ValidationFailure

__all__ = [
    "Cart",
    "CartItem",
    "CartParser",
    "DetailedValidationFailure",
    "ErrorType",
    "ValidationError",
    "ValidationFailure",
]

__version__ = "0.1.0"

"""値オブジェクトモジュール."""
from .cart_schema import CartSchema, ColumnSpec
from .validation_error import ValidationError

__all__ = ["CartSchema", "ColumnSpec", "ValidationError"]

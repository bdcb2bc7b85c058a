"""ドメイン層モジュール."""
from .entities import Cart, CartItem
from .enums import ColumnType, ValidationErrorType
from .identifiers import ItemId
from .ports import FileReader, IdGenerator
from .services import CartParser, ValidationFailedError, create_error
from .value_objects import CartSchema, ColumnSpec, ValidationError

__all__ = [
    # Identifiers
    "ItemId",
    # Enums
    "ColumnType",
    "ValidationErrorType",
    # Value Objects
    "CartSchema",
    "ColumnSpec",
    "ValidationError",
    # Entities
    "Cart",
    "CartItem",
    # Ports
    "FileReader",
    "IdGenerator",
    # Services
    "CartParser",
    "ValidationFailedError",
    "create_error",
]

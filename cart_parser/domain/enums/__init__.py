"""列挙型モジュール."""
from .column_type import ColumnType
from .validation_error_type import ValidationErrorType

__all__ = ["ColumnType", "ValidationErrorType"]

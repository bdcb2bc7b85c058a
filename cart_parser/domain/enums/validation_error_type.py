"""検証エラー種別の列挙型."""
from enum import Enum


class ValidationErrorType(Enum):
    """CSV検証エラーの種別."""

    HEADER = "header"
    ROW = "row"
    CELL = "cell"

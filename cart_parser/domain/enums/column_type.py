"""CSV列の値種別の列挙型."""
from enum import Enum


class ColumnType(Enum):
    """列に許容される値の種別."""

    STRING = "string"
    NON_NEGATIVE_NUMBER = "non_negative_number"
    POSITIVE_INTEGER = "positive_integer"

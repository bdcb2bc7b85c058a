"""CSV検証エラーの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..enums import ValidationErrorType


@dataclass(frozen=True)
class ValidationError:
    """CSV内の問題箇所を示す検証エラー.

    row はファイル先頭を0とする物理行番号（ヘッダーが0行目）。
    column は0始まりの列番号で、行全体のエラーでは None。
    """

    type: ValidationErrorType
    row: int
    column: int | None
    message: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.row < 0:
            raise ValueError("Row cannot be negative")
        if self.column is not None and self.column < 0:
            raise ValueError("Column cannot be negative")

    def to_dict(self) -> dict[str, Any]:
        """JSON化用の辞書に変換する."""
        return {
            "type": self.type.value,
            "row": self.row,
            "column": self.column,
            "message": self.message,
        }

    def __str__(self) -> str:
        """文字列表現."""
        location = f"row {self.row}"
        if self.column is not None:
            location += f", column {self.column}"
        return f"[{self.type.value}] {location}: {self.message}"

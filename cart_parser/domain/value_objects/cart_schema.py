"""カートCSVのスキーマ定義."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import ColumnType


@dataclass(frozen=True)
class ColumnSpec:
    """CSVの1列の定義."""

    name: str
    column_type: ColumnType


@dataclass(frozen=True)
class CartSchema:
    """カートCSVの列構成と区切り文字."""

    columns: tuple[ColumnSpec, ...]
    delimiter: str = ","

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.columns:
            raise ValueError("CartSchema requires at least one column")
        if not self.delimiter:
            raise ValueError("Delimiter cannot be empty")

    @classmethod
    def default(cls) -> CartSchema:
        """商品名・価格・数量の3列スキーマを生成する."""
        return cls(
            columns=(
                ColumnSpec("Product name", ColumnType.STRING),
                ColumnSpec("Price", ColumnType.NON_NEGATIVE_NUMBER),
                ColumnSpec("Quantity", ColumnType.POSITIVE_INTEGER),
            )
        )

    def column_names(self) -> list[str]:
        """列名のリストを取得する."""
        return [column.name for column in self.columns]

    def column_count(self) -> int:
        """列数を取得する."""
        return len(self.columns)

    def header_line(self) -> str:
        """期待されるヘッダー行を返す（例: "Product name,Price,Quantity"）."""
        return self.delimiter.join(self.column_names())

    def split(self, line: str) -> list[str]:
        """1行を区切り文字で分割し、各セルの前後空白を除去する."""
        return [cell.strip() for cell in line.split(self.delimiter)]

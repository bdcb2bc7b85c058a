"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..identifiers import ItemId


@dataclass(frozen=True)
class CartItem:
    """CSVの1行から生成されるカート内の明細."""

    item_id: ItemId
    name: str
    price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name.strip():
            raise ValueError("CartItem name cannot be empty")
        if not self.price.is_finite():
            raise ValueError("CartItem price must be finite")
        if self.price < 0:
            raise ValueError("CartItem price cannot be negative")
        if self.quantity <= 0:
            raise ValueError("CartItem quantity must be positive")

    def get_amount(self) -> Decimal:
        """小計（価格×数量）を計算する."""
        return self.price * self.quantity

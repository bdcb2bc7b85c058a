"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .cart_item import CartItem


@dataclass(frozen=True)
class Cart:
    """CSVから生成された明細の並びと合計金額（集約ルート）.

    合計は保持せず、参照のたびに items から再計算する。
    """

    items: tuple[CartItem, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, items: list[CartItem]) -> Cart:
        """明細のリストからカートを生成する."""
        return cls(items=tuple(items))

    @property
    def total(self) -> Decimal:
        """合計金額を計算する."""
        return sum((item.get_amount() for item in self.items), Decimal("0"))

    def get_item_count(self) -> int:
        """アイテム数を取得する."""
        return len(self.items)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self.items) == 0

    def get_items(self) -> list[CartItem]:
        """アイテムのリストを取得（防御的コピー）."""
        return list(self.items)

"""CartItemのテスト."""
from decimal import Decimal

import pytest

from cart_parser.domain.entities import CartItem
from cart_parser.domain.identifiers import ItemId


class TestCartItem:
    """CartItemの単体テスト."""

    def test_get_amountは価格と数量の積(self) -> None:
        item = CartItem(ItemId("i1"), "Mollis consequat", Decimal("9.00"), 2)
        assert item.get_amount() == Decimal("18.00")

    def test_価格0は許容される(self) -> None:
        item = CartItem(ItemId("i1"), "おまけ", Decimal("0"), 1)
        assert item.get_amount() == Decimal("0")

    def test_名前が空白のみはエラー(self) -> None:
        with pytest.raises(ValueError, match="name cannot be empty"):
            CartItem(ItemId("i1"), "  ", Decimal("1"), 1)

    def test_負の価格はエラー(self) -> None:
        with pytest.raises(ValueError, match="price cannot be negative"):
            CartItem(ItemId("i1"), "a", Decimal("-0.01"), 1)

    def test_無限大の価格はエラー(self) -> None:
        with pytest.raises(ValueError, match="price must be finite"):
            CartItem(ItemId("i1"), "a", Decimal("Infinity"), 1)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_数量が正でなければエラー(self, quantity: int) -> None:
        with pytest.raises(ValueError, match="quantity must be positive"):
            CartItem(ItemId("i1"), "a", Decimal("1"), quantity)

    def test_不変オブジェクトである(self) -> None:
        item = CartItem(ItemId("i1"), "a", Decimal("1"), 1)
        with pytest.raises(AttributeError):
            item.quantity = 3  # type: ignore

"""CLI レスポンスユーティリティ."""
import json
from decimal import Decimal
from typing import Any

from cart_parser.domain.entities import Cart, CartItem
from cart_parser.domain.value_objects import ValidationError


def to_number(value: Decimal) -> int | float:
    """Decimal を JSON の数値に変換する（整数値は int のまま出力する）."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def item_to_dict(item: CartItem) -> dict[str, Any]:
    """カートアイテムを辞書に変換する."""
    return {
        "id": str(item.item_id),
        "name": item.name,
        "price": to_number(item.price),
        "quantity": item.quantity,
    }


def cart_to_dict(cart: Cart) -> dict[str, Any]:
    """カートを {"items": [...], "total": ...} 形式の辞書に変換する."""
    return {
        "items": [item_to_dict(item) for item in cart.get_items()],
        "total": to_number(cart.total),
    }


def success_body(cart: Cart) -> dict[str, Any]:
    """成功時の出力ボディを生成する."""
    return cart_to_dict(cart)


def error_body(
    message: str,
    error_code: str | None = None,
    details: list[ValidationError] | None = None,
) -> dict[str, Any]:
    """エラー時の出力ボディを生成する.

    Args:
        message: エラーメッセージ
        error_code: エラーコード
        details: 検証エラーの一覧

    Returns:
        {"error": {"message": ..., "code": ..., "details": [...]}} 形式の辞書
    """
    body: dict[str, Any] = {"error": {"message": message}}
    if error_code:
        body["error"]["code"] = error_code
    if details:
        body["error"]["details"] = [error.to_dict() for error in details]
    return body


def to_json(body: dict[str, Any], indent: int | None = None) -> str:
    """出力ボディをJSON文字列にする."""
    return json.dumps(body, ensure_ascii=False, indent=indent)

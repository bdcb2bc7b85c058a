"""カートアイテム識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ItemId:
    """カートアイテムの識別子.

    JSON出力の "id" にそのまま使うため、空白を含む値は受け付けない。
    UUID形式（既定）と "item-1" のような連番形式の2通りで払い出す。
    """

    value: str

    DEFAULT_PREFIX = "item-"

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("ItemId cannot be empty")
        if any(ch.isspace() for ch in self.value):
            raise ValueError("ItemId cannot contain whitespace")

    @classmethod
    def generate(cls) -> ItemId:
        """UUID形式の新しいItemIdを生成する."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def sequential(cls, number: int, prefix: str = DEFAULT_PREFIX) -> ItemId:
        """連番形式のItemIdを生成する（例: item-1）."""
        if number < 0:
            raise ValueError("ItemId sequence number cannot be negative")
        return cls(f"{prefix}{number}")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value

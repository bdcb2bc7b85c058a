"""識別子生成インターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import ItemId


class IdGenerator(ABC):
    """カートアイテムの識別子を払い出すインターフェース."""

    @abstractmethod
    def next_id(self) -> ItemId:
        """呼び出しごとに新しい一意なItemIdを返す."""
        pass

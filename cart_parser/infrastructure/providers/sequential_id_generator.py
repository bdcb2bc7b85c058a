"""連番による識別子生成の実装."""
import itertools

from cart_parser.domain.identifiers import ItemId
from cart_parser.domain.ports import IdGenerator


class SequentialIdGenerator(IdGenerator):
    """連番のItemIdを払い出す（例: item-1, item-2。再現性が必要な出力・テスト用）."""

    def __init__(self, prefix: str = ItemId.DEFAULT_PREFIX, start: int = 1) -> None:
        """初期化.

        Args:
            prefix: IDの接頭辞
            start: 最初の番号
        """
        self._prefix = prefix
        self._counter = itertools.count(start)

    def next_id(self) -> ItemId:
        """次の連番IDを返す."""
        return ItemId.sequential(next(self._counter), prefix=self._prefix)

"""UUID による識別子生成の実装."""
from cart_parser.domain.identifiers import ItemId
from cart_parser.domain.ports import IdGenerator


class UuidIdGenerator(IdGenerator):
    """UUID4 形式のItemIdを払い出す."""

    def next_id(self) -> ItemId:
        """新しいItemIdを生成する."""
        return ItemId.generate()

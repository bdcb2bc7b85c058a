"""IdGenerator ファクトリ."""
import logging
import os

from cart_parser.domain.ports import IdGenerator

logger = logging.getLogger(__name__)


def create_id_generator() -> IdGenerator:
    """環境変数に基づいてIdGeneratorを生成する.

    ITEM_ID_GENERATOR:
        "uuid"       → UuidIdGenerator（デフォルト）
        "sequential" → SequentialIdGenerator（item-1, item-2, ...）
    """
    generator_type = os.environ.get("ITEM_ID_GENERATOR")
    if generator_type == "sequential":
        from cart_parser.infrastructure.providers.sequential_id_generator import (
            SequentialIdGenerator,
        )

        return SequentialIdGenerator()

    if generator_type and generator_type != "uuid":
        logger.warning("Unknown ITEM_ID_GENERATOR=%s, falling back to uuid", generator_type)

    from cart_parser.infrastructure.providers.uuid_id_generator import UuidIdGenerator

    return UuidIdGenerator()

"""CartParser ファクトリ."""
from cart_parser.domain.services import CartParser
from cart_parser.infrastructure.providers.file_reader_factory import create_file_reader
from cart_parser.infrastructure.providers.id_generator_factory import create_id_generator


def create_cart_parser() -> CartParser:
    """環境変数の設定に従って組み立てたCartParserを返す."""
    return CartParser(
        file_reader=create_file_reader(),
        id_generator=create_id_generator(),
    )

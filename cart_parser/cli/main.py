"""カートCSVをJSONに変換するコマンドラインツール.

Usage:
    cart-parser samples/cart.csv             # JSONを標準出力に出力
    cart-parser samples/cart.csv --indent 2  # 整形して出力
    cart-parser samples/cart.csv --verbose   # DEBUGログを標準エラーに出力
"""
import argparse
import logging
import sys
from pathlib import Path

from cart_parser.cli.response import error_body, success_body, to_json
from cart_parser.domain.services import ValidationFailedError
from cart_parser.infrastructure.providers import create_cart_parser

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_FILE_READ_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを生成する."""
    parser = argparse.ArgumentParser(description="Convert a cart CSV file to JSON")
    parser.add_argument("path", help="Path to the cart CSV file")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent width")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """エントリーポイント."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    # コアは絶対パスのみ受け付けるため、ここで作業ディレクトリ基準に解決する
    path = Path(args.path).expanduser().absolute()

    try:
        cart = create_cart_parser().parse(path)
    except ValidationFailedError as e:
        print(
            to_json(error_body(str(e), "VALIDATION_FAILED", e.errors), args.indent),
            file=sys.stderr,
        )
        return EXIT_VALIDATION_FAILED
    except OSError as e:
        logger.debug("Failed to read %s", path, exc_info=True)
        print(to_json(error_body(str(e), "FILE_READ_ERROR"), args.indent), file=sys.stderr)
        return EXIT_FILE_READ_ERROR

    print(to_json(success_body(cart), args.indent))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

"""カートCSVパーサードメインサービス."""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from decimal import Decimal
from pathlib import Path
from typing import Any

from ..entities import Cart, CartItem
from ..enums import ColumnType, ValidationErrorType
from ..ports import FileReader, IdGenerator
from ..value_objects import CartSchema, ColumnSpec, ValidationError

logger = logging.getLogger(__name__)

ErrorFactory = Callable[[ValidationErrorType, int, int | None, str], Any]


def create_error(
    error_type: ValidationErrorType, row: int, column: int | None, message: str
) -> ValidationError:
    """検証エラーを生成する（CartParserの既定のエラーファクトリ）."""
    return ValidationError(type=error_type, row=row, column=column, message=message)


class ValidationFailedError(Exception):
    """CSVの検証で1件以上のエラーが見つかった."""

    def __init__(self, errors: list[ValidationError]) -> None:
        """初期化.

        Args:
            errors: 検出された全ての検証エラー
        """
        self.errors = list(errors)
        super().__init__(f"CSV validation failed with {len(self.errors)} error(s)")


def _numbered_lines(content: str) -> list[tuple[int, str]]:
    """空行を除いた (物理行番号, 行) の組を返す."""
    lines = content.lstrip("\ufeff").splitlines()
    return [(row, line) for row, line in enumerate(lines) if line.strip()]


# ASCII の10進表記のみ。指数表記・桁区切り・全角数字は受け付けない
MAX_DIGITS = 12
_DECIMAL_PATTERN = re.compile(rf"-?\d{{1,{MAX_DIGITS}}}(?:\.\d{{1,{MAX_DIGITS}}})?", re.ASCII)
_INTEGER_PATTERN = re.compile(rf"-?\d{{1,{MAX_DIGITS}}}", re.ASCII)


class CartParser:
    """CSVを読み込み、検証し、カートに変換するサービス.

    行番号はファイル先頭を0とする物理行番号で、ヘッダーが0行目、
    最初のデータ行が1行目になる。空行は無視するが番号は消費する。
    """

    SCHEMA = CartSchema.default()

    def __init__(
        self,
        file_reader: FileReader,
        id_generator: IdGenerator,
        error_factory: ErrorFactory = create_error,
    ) -> None:
        """初期化.

        Args:
            file_reader: CSVファイルの読み込み手段
            id_generator: アイテムIDの払い出し手段
            error_factory: 検証エラーの生成関数
        """
        self._file_reader = file_reader
        self._id_generator = id_generator
        self._error_factory = error_factory

    def read_file(self, path: str | Path) -> str:
        """ファイルを読み込む.

        Raises:
            OSError: 絶対パスでない、またはファイルを読み込めない場合
        """
        if not Path(path).is_absolute():
            raise OSError(f"Path must be absolute: {path}")
        return self._file_reader.read(path)

    def validate(self, content: str) -> list[ValidationError]:
        """CSV全体を検証し、見つかった全てのエラーを返す."""
        errors: list[ValidationError] = []
        lines = _numbered_lines(content)
        if not lines:
            errors.append(
                self.create_error(
                    ValidationErrorType.HEADER,
                    0,
                    0,
                    f'ヘッダー行 "{self.SCHEMA.header_line()}" がありません',
                )
            )
            return errors

        header_row, header_line = lines[0]
        header_error = self._validate_header(header_row, header_line)
        if header_error is not None:
            errors.append(header_error)

        for row, line in lines[1:]:
            errors.extend(self._validate_row(row, line))
        return errors

    def parse_line(self, line: str) -> CartItem:
        """検証済みのデータ行1行をカートアイテムに変換する."""
        name, price, quantity = self.SCHEMA.split(line)
        return CartItem(
            item_id=self._id_generator.next_id(),
            name=name,
            price=Decimal(price),
            quantity=int(quantity),
        )

    def calc_total(self, items: Iterable[CartItem]) -> Decimal:
        """価格×数量の総和を計算する（Cart.total と同じ計算）."""
        return Cart.of(list(items)).total

    def parse(self, path: str | Path) -> Cart:
        """CSVファイルを読み込んでカートを生成する.

        Raises:
            OSError: ファイルを読み込めない場合
            ValidationFailedError: 検証エラーが1件以上ある場合
        """
        logger.debug("Parsing cart CSV: %s", path)
        content = self.read_file(path)

        errors = self.validate(content)
        if errors:
            logger.warning("Validation failed for %s: %d error(s)", path, len(errors))
            raise ValidationFailedError(errors)

        cart = Cart.of([self.parse_line(line) for _, line in _numbered_lines(content)[1:]])
        logger.info(
            "Parsed %d item(s) from %s, total=%s",
            cart.get_item_count(),
            path,
            self.calc_total(cart.items),
        )
        return cart

    def create_error(
        self,
        error_type: ValidationErrorType,
        row: int,
        column: int | None,
        message: str,
    ) -> ValidationError:
        """検証エラーを生成する."""
        return self._error_factory(error_type, row, column, message)

    def _validate_header(self, row: int, line: str) -> ValidationError | None:
        """ヘッダー行を検証する（不一致は1件のエラーにまとめる）."""
        expected = self.SCHEMA.column_names()
        actual = self.SCHEMA.split(line)
        if actual == expected:
            return None

        column = next(
            (
                i
                for i in range(max(len(expected), len(actual)))
                if i >= len(expected) or i >= len(actual) or expected[i] != actual[i]
            ),
            0,
        )
        return self.create_error(
            ValidationErrorType.HEADER,
            row,
            column,
            f'ヘッダーは "{self.SCHEMA.header_line()}" である必要がありますが '
            f'"{line.strip()}" でした',
        )

    def _validate_row(self, row: int, line: str) -> list[ValidationError]:
        """データ行1行を検証する."""
        cells = self.SCHEMA.split(line)
        expected_count = self.SCHEMA.column_count()
        if len(cells) != expected_count:
            return [
                self.create_error(
                    ValidationErrorType.ROW,
                    row,
                    None,
                    f"{expected_count}列が必要ですが{len(cells)}列でした",
                )
            ]

        errors: list[ValidationError] = []
        for column, (spec, cell) in enumerate(zip(self.SCHEMA.columns, cells)):
            message = self._check_cell(spec, cell)
            if message is not None:
                errors.append(
                    self.create_error(ValidationErrorType.CELL, row, column, message)
                )
        return errors

    @staticmethod
    def _check_cell(spec: ColumnSpec, cell: str) -> str | None:
        """セルの値を検証し、問題があればメッセージを返す."""
        if not cell:
            return f"{spec.name}が空です"
        if spec.column_type is ColumnType.STRING:
            return None

        if spec.column_type is ColumnType.POSITIVE_INTEGER:
            if not _INTEGER_PATTERN.fullmatch(cell) or int(cell) <= 0:
                return f'{spec.name}は正の整数である必要があります（値: "{cell}"）'
            return None

        if not _DECIMAL_PATTERN.fullmatch(cell):
            return f'{spec.name}は数値である必要があります（値: "{cell}"）'
        if Decimal(cell) < 0:
            return f'{spec.name}は0以上である必要があります（値: "{cell}"）'
        return None

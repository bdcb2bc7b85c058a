"""列挙型のテスト."""
from cart_parser.domain.enums import ColumnType, ValidationErrorType


class TestValidationErrorType:
    """ValidationErrorTypeの単体テスト."""

    def test_値がJSON出力用の小文字の種別名である(self) -> None:
        assert [t.value for t in ValidationErrorType] == ["header", "row", "cell"]

    def test_値から種別を復元できる(self) -> None:
        assert ValidationErrorType("cell") is ValidationErrorType.CELL


class TestColumnType:
    """ColumnTypeの単体テスト."""

    def test_3種類の値種別がある(self) -> None:
        assert len(list(ColumnType)) == 3

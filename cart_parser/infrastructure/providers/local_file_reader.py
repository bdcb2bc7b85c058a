"""ローカルファイルシステムからの読み込み実装."""
from pathlib import Path

from cart_parser.domain.ports import FileReader


class LocalFileReader(FileReader):
    """ローカルディスク上のCSVファイルを丸ごと読み込む."""

    DEFAULT_ENCODING = "utf-8"

    def __init__(self, encoding: str | None = None) -> None:
        """初期化.

        Args:
            encoding: ファイルの文字コード
        """
        self._encoding = encoding or self.DEFAULT_ENCODING

    @property
    def encoding(self) -> str:
        """ファイルの文字コード."""
        return self._encoding

    def read(self, path: str | Path) -> str:
        """ファイル全体をテキストとして読み込む."""
        return Path(path).read_text(encoding=self._encoding)

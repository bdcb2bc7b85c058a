"""ファイル読み込みのインメモリ実装."""
from pathlib import Path

from cart_parser.domain.ports import FileReader


class InMemoryFileReader(FileReader):
    """ファイル読み込みのインメモリ実装（テスト用）."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        """初期化."""
        self._files: dict[str, str] = {}
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str | Path, content: str) -> None:
        """ファイルを登録する."""
        self._files[str(Path(path))] = content

    def read(self, path: str | Path) -> str:
        """登録済みファイルの内容を返す."""
        key = str(Path(path))
        if key not in self._files:
            raise FileNotFoundError(f"No such file: {path}")
        return self._files[key]

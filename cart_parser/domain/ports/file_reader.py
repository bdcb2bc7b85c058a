"""ファイル読み込みインターフェース."""
from abc import ABC, abstractmethod
from pathlib import Path


class FileReader(ABC):
    """CSVファイルの内容を取得するインターフェース."""

    @abstractmethod
    def read(self, path: str | Path) -> str:
        """ファイル全体をテキストとして読み込む.

        Raises:
            OSError: ファイルが存在しない、または読み込めない場合
        """
        pass

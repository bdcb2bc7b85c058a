"""ポートモジュール."""
from .file_reader import FileReader
from .id_generator import IdGenerator

__all__ = ["FileReader", "IdGenerator"]

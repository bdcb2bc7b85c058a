"""プロバイダー実装."""
from .cart_parser_factory import create_cart_parser
from .file_reader_factory import create_file_reader
from .id_generator_factory import create_id_generator
from .in_memory_file_reader import InMemoryFileReader
from .local_file_reader import LocalFileReader
from .sequential_id_generator import SequentialIdGenerator
from .uuid_id_generator import UuidIdGenerator

__all__ = [
    "InMemoryFileReader",
    "LocalFileReader",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "create_cart_parser",
    "create_file_reader",
    "create_id_generator",
]

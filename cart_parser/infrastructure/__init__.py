"""インフラストラクチャ層モジュール."""
from .providers import (
    InMemoryFileReader,
    LocalFileReader,
    SequentialIdGenerator,
    UuidIdGenerator,
    create_cart_parser,
)

__all__ = [
    "InMemoryFileReader",
    "LocalFileReader",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "create_cart_parser",
]

"""ドメインサービスモジュール."""
from .cart_parser import CartParser, ErrorFactory, ValidationFailedError, create_error

__all__ = ["CartParser", "ErrorFactory", "ValidationFailedError", "create_error"]

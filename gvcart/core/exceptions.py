"""Custom exceptions for the cart bot."""
from __future__ import annotations


class GvCartException(Exception):
    """Base exception for all cart errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationException(GvCartException):
    """Input validation errors."""

    pass


class StorageException(GvCartException):
    """Persistent blob store errors."""

    def __init__(self, key: str, reason: object) -> None:
        super().__init__(f"Cart storage failure for key {key}: {reason}")
        self.key = key
        self.reason = reason


class CartItemNotFoundException(GvCartException):
    """Cart item referenced by a UI event is no longer in the cart."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Cart item {token} not found")
        self.token = token


class ConfigurationException(GvCartException):
    """Configuration errors."""

    pass


class CatalogException(GvCartException):
    """Catalog source errors."""

    def __init__(self, source: str, reason: object) -> None:
        super().__init__(f"Cannot load catalogs from {source}: {reason}")
        self.source = source
        self.reason = reason

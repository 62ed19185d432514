"""Domain package."""

from .cart import (
    Cart,
    CatalogGroup,
    LineItem,
    OrderSummary,
    Product,
    cart_key,
    item_token,
    normalize_identity,
)
from .catalog import Catalog

__all__ = [
    # Cart
    "Cart",
    "LineItem",
    "Product",
    "CatalogGroup",
    "OrderSummary",
    "cart_key",
    "item_token",
    "normalize_identity",
    # Catalogs
    "Catalog",
]

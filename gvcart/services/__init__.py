"""Services package."""

from .cart_presenter import CartPresenter, CartScreen, derive_view_model, format_for_submission
from .catalog_service import CatalogService, group_catalogs, load_catalogs

__all__ = [
    "CartPresenter",
    "CartScreen",
    "derive_view_model",
    "format_for_submission",
    "CatalogService",
    "group_catalogs",
    "load_catalogs",
]

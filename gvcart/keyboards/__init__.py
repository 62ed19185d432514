"""Keyboards package."""

from .cart import build_cart_keyboard, build_submit_link_keyboard
from .catalogs import build_catalogs_keyboard

__all__ = [
    "build_cart_keyboard",
    "build_submit_link_keyboard",
    "build_catalogs_keyboard",
]

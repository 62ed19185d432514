"""Bot handlers: cart screen and catalog index."""
from aiogram import Router

from . import cart, catalogs
from .common import setup_dependencies


def build_router() -> Router:
    """Root router with all handler routers attached."""
    root = Router(name="gvcart")
    root.include_router(catalogs.router)
    root.include_router(cart.router)
    return root


__all__ = ["build_router", "setup_dependencies"]

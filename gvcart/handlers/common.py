"""Common handler dependencies and small helpers.

This module centralizes shared globals (blob store, cart settings, catalog
source) set once at startup by ``setup_dependencies``.
"""
from __future__ import annotations

from typing import Any

from gvcart.core.cart_store import CartStore
from gvcart.core.config import CartConfig
from gvcart.core.constants import CART_STORAGE_KEY, MINIMUM_ORDER
from gvcart.integrations.blob_store import BlobStore, MemoryBlobStore
from gvcart.integrations.order_channel import WhatsAppOrderChannel
from gvcart.services.cart_presenter import CartPresenter
from gvcart.services.catalog_service import CatalogService

blob_store: BlobStore = MemoryBlobStore()
cart_config: CartConfig = CartConfig(
    storage_key=CART_STORAGE_KEY, minimum_order=MINIMUM_ORDER, whatsapp_phone=""
)
catalog_service: CatalogService | None = None


def setup_dependencies(
    store: BlobStore,
    config: CartConfig,
    catalogs: CatalogService | None = None,
) -> None:
    """Initialize shared handler dependencies."""
    global blob_store, cart_config, catalog_service
    blob_store = store
    cart_config = config
    catalog_service = catalogs


def cart_store_for(user_id: int) -> CartStore:
    """Each Telegram user owns an independent cart under its own key."""
    return CartStore(blob_store, f"{cart_config.storage_key}:{int(user_id)}")


def presenter_for(user_id: int) -> CartPresenter:
    return CartPresenter(
        cart_store_for(user_id),
        minimum_order=cart_config.minimum_order,
        channel=WhatsAppOrderChannel(cart_config.whatsapp_phone),
    )


def token_from(data: Any, prefix: str) -> str:
    """Extract the item token from callback data like ``cart:inc:<token>``."""
    if not isinstance(data, str) or not data.startswith(prefix):
        return ""
    return data[len(prefix):]

"""Cart store - canonical cart state persisted as one JSON blob.

Every public mutation reads the blob, applies the change and writes the
whole cart back. Reads of a corrupted blob yield an empty cart.
"""
from __future__ import annotations

import copy
import json
from typing import Any, Mapping

from gvcart.core.constants import CART_STORAGE_KEY, MAX_QUANTITY
from gvcart.domain.cart import (
    Cart,
    LineItem,
    Product,
    cart_key,
    coerce_quantity,
    normalize_identity,
)
from gvcart.integrations.blob_store import BlobStore
from gvcart.logging_config import logger


class CartStore:
    """Owns the cart mapping of CartKey -> LineItem.

    Args:
        blob_store: Backing key-value store
        storage_key: Key the serialized cart lives under
    """

    def __init__(self, blob_store: BlobStore, storage_key: str = CART_STORAGE_KEY) -> None:
        self._blob_store = blob_store
        self.storage_key = storage_key

    # ------------------------------------------------------------------
    # persistence
    # ------------------------------------------------------------------

    def _load(self) -> Cart:
        raw = self._blob_store.read(self.storage_key)
        if not raw:
            return {}
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as exc:
            logger.warning("Corrupted cart blob under %s, starting empty: %s", self.storage_key, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Cart blob under %s is not an object, starting empty", self.storage_key)
            return {}

        cart: Cart = {}
        for stored_key, record in payload.items():
            if not isinstance(record, Mapping):
                logger.warning("Skipping malformed cart record %s", stored_key)
                continue
            try:
                item = LineItem.from_dict(record)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed cart record %s: %s", stored_key, exc)
                continue
            key = item.key
            if key in cart:
                # legacy blobs written with untrimmed keys collapse here
                merged = cart[key].quantity + item.quantity
                cart[key].quantity = min(merged, MAX_QUANTITY)
                continue
            cart[key] = item
        return cart

    def _save(self, cart: Cart) -> None:
        serialized = json.dumps(
            {key: item.to_dict() for key, item in cart.items()},
            ensure_ascii=False,
        )
        self._blob_store.write(self.storage_key, serialized)

    # ------------------------------------------------------------------
    # mutations
    # ------------------------------------------------------------------

    def add_item(self, product: Product | Mapping[str, Any], catalog_name: str) -> LineItem:
        """Add one unit of a product, or increment it when already present.

        Re-adding keeps the stored name, price and image of the existing line.
        """
        if not isinstance(product, Product):
            product = Product.from_mapping(product)
        catalog = normalize_identity(catalog_name)
        key = cart_key(product.sku, catalog)

        cart = self._load()
        item = cart.get(key)
        if item is not None:
            item.quantity = min(item.quantity + 1, MAX_QUANTITY)
            logger.info("Incremented cart item %s qty=%s", key, item.quantity)
        else:
            item = LineItem(
                sku=product.sku,
                catalog_name=catalog,
                name=product.name,
                unit_price=product.unit_price,
                image=product.image,
                quantity=1,
            )
            cart[key] = item
            logger.info("Added cart item %s", key)

        self._save(cart)
        return copy.deepcopy(item)

    def set_quantity(self, sku: str, catalog_name: str, quantity: Any) -> bool:
        """Overwrite an item's quantity; zero or less removes it.

        Returns True if the cart changed. Unknown items are a no-op.
        """
        quantity = coerce_quantity(quantity)
        key = cart_key(sku, catalog_name)

        cart = self._load()
        item = cart.get(key)
        if item is None:
            return False

        if quantity <= 0:
            del cart[key]
            logger.info("Removed cart item %s (quantity %s)", key, quantity)
        else:
            item.quantity = quantity
            logger.info("Updated cart item %s qty=%s", key, quantity)

        self._save(cart)
        return True

    def remove_item(self, sku: str, catalog_name: str) -> bool:
        """Delete an item. Returns False, without writing, when it is absent."""
        key = cart_key(sku, catalog_name)
        cart = self._load()
        if key not in cart:
            return False
        del cart[key]
        self._save(cart)
        logger.info("Removed cart item %s", key)
        return True

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def get_contents(self) -> Cart:
        """Current cart as an independent copy."""
        return copy.deepcopy(self._load())

    def get_item(self, key: str) -> LineItem | None:
        return self._load().get(key)

    def find_by_token(self, token: str) -> LineItem | None:
        """Resolve a callback token back to its line item."""
        for item in self._load().values():
            if item.token == token:
                return item
        return None

    def item_count(self) -> int:
        return sum(item.quantity for item in self._load().values())

    def is_empty(self) -> bool:
        return not self._load()

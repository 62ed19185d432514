"""Shared pytest fixtures for cart tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram import types

from gvcart.core.cart_store import CartStore
from gvcart.core.config import CartConfig
from gvcart.domain.cart import Product
from gvcart.integrations.blob_store import MemoryBlobStore
from gvcart.services.cart_presenter import CartPresenter


@dataclass
class FakeRedisClient:
    data: dict[str, str] = field(default_factory=dict)
    expiry: dict[str, int] = field(default_factory=dict)
    set_calls: list[str] = field(default_factory=list)

    def ping(self) -> bool:
        return True

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        self.set_calls.append(key)
        return True

    def setex(self, key: str, ttl: int, value: str) -> bool:
        self.data[key] = value
        self.expiry[key] = ttl
        self.set_calls.append(key)
        return True


@dataclass
class RecordingChannel:
    """Order channel double that keeps every submitted text."""

    submitted: list[str] = field(default_factory=list)

    def submit(self, text: str) -> str:
        self.submitted.append(text)
        return f"https://wa.me/?text=order-{len(self.submitted)}"


@pytest.fixture
def blob_store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def cart_store(blob_store: MemoryBlobStore) -> CartStore:
    return CartStore(blob_store)


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def presenter(cart_store: CartStore, channel: RecordingChannel) -> CartPresenter:
    return CartPresenter(cart_store, minimum_order=12000, channel=channel)


@pytest.fixture
def tea() -> Product:
    return Product(sku="A1", name="Tea", unit_price=500, image="x.png")


@pytest.fixture
def fake_redis() -> FakeRedisClient:
    return FakeRedisClient()


@pytest.fixture
def handler_deps():
    """Point the bot handlers at a fresh in-memory blob store."""
    from gvcart.handlers import common

    previous = (common.blob_store, common.cart_config, common.catalog_service)
    store = MemoryBlobStore()
    config = CartConfig(
        storage_key="test_cart", minimum_order=12000, whatsapp_phone="+91 98765 43210"
    )
    common.setup_dependencies(store, config, None)
    try:
        yield store
    finally:
        common.setup_dependencies(*previous)


def _callback(data: str, user_id: int = 42) -> MagicMock:
    callback = MagicMock(spec=types.CallbackQuery)
    callback.data = data
    callback.from_user = MagicMock(id=user_id)
    callback.message = MagicMock()
    callback.message.edit_text = AsyncMock()
    callback.message.answer = AsyncMock()
    callback.answer = AsyncMock()
    return callback


def _message(user_id: int = 42, web_app_data: str | None = None) -> MagicMock:
    message = MagicMock(spec=types.Message)
    message.from_user = MagicMock(id=user_id)
    message.web_app_data = MagicMock(data=web_app_data) if web_app_data is not None else None
    message.answer = AsyncMock()
    return message


@pytest.fixture
def make_callback():
    """CallbackQuery double with awaitable answer/edit methods."""
    return _callback


@pytest.fixture
def make_message():
    return _message

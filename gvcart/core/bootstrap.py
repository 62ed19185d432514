"""Application bootstrap wiring bot, dispatcher, cart storage and catalogs."""
from __future__ import annotations

from aiogram import Bot, Dispatcher

from gvcart.handlers import build_router, setup_dependencies
from gvcart.integrations.blob_store import BlobStore, MemoryBlobStore, RedisBlobStore
from gvcart.logging_config import logger
from gvcart.services.catalog_service import CatalogService

from .config import Settings


def create_blob_store(redis_url: str | None) -> BlobStore:
    """Redis when configured and reachable, process memory otherwise."""
    if redis_url:
        try:
            store = RedisBlobStore(redis_url)
        except ValueError as e:
            logger.warning(f"Invalid REDIS_URL, carts kept in memory: {e}")
            return MemoryBlobStore()
        if store.ping():
            logger.info("Using Redis for cart storage")
            return store
        logger.warning("Redis is unreachable, carts kept in memory (lost on restart)")
        return MemoryBlobStore()

    logger.info("REDIS_URL not set, carts kept in memory (lost on restart)")
    return MemoryBlobStore()


def build_application(settings: Settings) -> tuple[Bot, Dispatcher, BlobStore]:
    """Create bot runtime components from configuration."""
    bot = Bot(token=settings.bot_token)
    blob_store = create_blob_store(settings.redis_url)
    catalogs = CatalogService(settings.catalogs.path, settings.catalogs.base_url)

    setup_dependencies(blob_store, settings.cart, catalogs)

    dispatcher = Dispatcher()
    dispatcher.include_router(build_router())

    return bot, dispatcher, blob_store

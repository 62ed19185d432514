"""Integrations package - persistence backends and outbound order channel."""

from gvcart.integrations.blob_store import BlobStore, MemoryBlobStore, RedisBlobStore
from gvcart.integrations.order_channel import OrderChannel, WhatsAppOrderChannel

__all__ = [
    "BlobStore",
    "MemoryBlobStore",
    "RedisBlobStore",
    "OrderChannel",
    "WhatsAppOrderChannel",
]

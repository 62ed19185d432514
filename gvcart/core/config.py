"""Environment-driven configuration objects for the cart bot."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import CART_STORAGE_KEY, DEFAULT_CATALOGS_PATH, MINIMUM_ORDER
from .exceptions import ConfigurationException


def _str_to_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationException(f"{name} must be an integer, got {raw!r}")


@dataclass(slots=True)
class CartConfig:
    storage_key: str
    minimum_order: int
    whatsapp_phone: str


@dataclass(slots=True)
class CatalogConfig:
    path: str
    base_url: str


@dataclass(slots=True)
class Settings:
    bot_token: str
    redis_url: str | None
    log_level: str
    cart: CartConfig
    catalogs: CatalogConfig


def load_settings(require_token: bool = True) -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    token = os.getenv("TELEGRAM_BOT_TOKEN", "")
    if require_token and not token:
        raise ConfigurationException("TELEGRAM_BOT_TOKEN environment variable is not set")

    minimum_order = _str_to_int("MINIMUM_ORDER", MINIMUM_ORDER)
    if minimum_order <= 0:
        raise ConfigurationException("MINIMUM_ORDER must be positive")

    cart = CartConfig(
        storage_key=os.getenv("CART_STORAGE_KEY") or CART_STORAGE_KEY,
        minimum_order=minimum_order,
        whatsapp_phone=os.getenv("WHATSAPP_PHONE", ""),
    )
    catalogs = CatalogConfig(
        path=os.getenv("CATALOGS_PATH") or DEFAULT_CATALOGS_PATH,
        base_url=os.getenv("CATALOGS_BASE_URL", "").rstrip("/"),
    )

    return Settings(
        bot_token=token,
        redis_url=os.getenv("REDIS_URL") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cart=cart,
        catalogs=catalogs,
    )

from __future__ import annotations

import pytest

import gvcart.core.config as config_module
from gvcart.core.config import load_settings
from gvcart.core.constants import CART_STORAGE_KEY, DEFAULT_CATALOGS_PATH, MINIMUM_ORDER
from gvcart.core.exceptions import ConfigurationException

ENV_VARS = (
    "TELEGRAM_BOT_TOKEN",
    "REDIS_URL",
    "CART_STORAGE_KEY",
    "MINIMUM_ORDER",
    "WHATSAPP_PHONE",
    "CATALOGS_PATH",
    "CATALOGS_BASE_URL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")

    settings = load_settings()

    assert settings.bot_token == "123:abc"
    assert settings.redis_url is None
    assert settings.log_level == "INFO"
    assert settings.cart.storage_key == CART_STORAGE_KEY
    assert settings.cart.minimum_order == MINIMUM_ORDER == 12000
    assert settings.catalogs.path == DEFAULT_CATALOGS_PATH


def test_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/1")
    monkeypatch.setenv("CART_STORAGE_KEY", "shop_cart")
    monkeypatch.setenv("MINIMUM_ORDER", " 5000 ")
    monkeypatch.setenv("WHATSAPP_PHONE", "+91 98765 43210")
    monkeypatch.setenv("CATALOGS_BASE_URL", "https://shop.example/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.redis_url == "redis://localhost:6379/1"
    assert settings.cart.storage_key == "shop_cart"
    assert settings.cart.minimum_order == 5000
    assert settings.cart.whatsapp_phone == "+91 98765 43210"
    assert settings.catalogs.base_url == "https://shop.example"
    assert settings.log_level == "DEBUG"


def test_missing_token() -> None:
    with pytest.raises(ConfigurationException):
        load_settings()

    assert load_settings(require_token=False).bot_token == ""


@pytest.mark.parametrize("value", ["abc", "0", "-100"])
def test_invalid_minimum_order(monkeypatch, value) -> None:
    monkeypatch.setenv("MINIMUM_ORDER", value)

    with pytest.raises(ConfigurationException):
        load_settings(require_token=False)

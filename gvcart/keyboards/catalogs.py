"""Catalog keyboard: one WebApp button per visible catalog."""
from __future__ import annotations

from typing import Mapping, Sequence

from aiogram.types import WebAppInfo
from aiogram.utils.keyboard import ReplyKeyboardBuilder

from gvcart.domain.catalog import Catalog
from gvcart.logging_config import logger
from gvcart.texts import get_text


def build_catalogs_keyboard(
    groups: Mapping[str, Sequence[Catalog]], base_url: str = ""
) -> ReplyKeyboardBuilder:
    """Reply keyboard opening each catalog page as a Telegram WebApp.

    Catalog pages send picked products back through ``web_app_data``, which
    Telegram only delivers from reply keyboard buttons. Telegram accepts
    WebApp links over HTTPS only; catalogs resolving to anything else get no
    button.
    """
    kb = ReplyKeyboardBuilder()
    count = 0
    for catalogs in groups.values():
        for catalog in catalogs:
            url = catalog.url(base_url)
            if not url.startswith("https://"):
                logger.warning(
                    "Catalog %r has no HTTPS link (%s), set CATALOGS_BASE_URL", catalog.title, url
                )
                continue
            kb.button(text=catalog.title, web_app=WebAppInfo(url=url))
            count += 1

    kb.button(text=get_text("my_cart"))
    sizes = [2] * (count // 2)
    if count % 2:
        sizes.append(1)
    sizes.append(1)
    kb.adjust(*sizes)
    return kb

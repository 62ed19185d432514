"""Catalog index handlers."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.filters import Command, CommandStart

from gvcart.core.constants import CB_VIEW_CATALOGS
from gvcart.core.exceptions import CatalogException
from gvcart.keyboards.catalogs import build_catalogs_keyboard
from gvcart.logging_config import logger
from gvcart.templates.catalogs import render_catalog_error, render_catalog_index

from . import common

router = Router(name="catalogs")


async def send_catalogs(message: types.Message) -> None:
    service = common.catalog_service
    if service is None:
        await message.answer(render_catalog_error())
        return

    try:
        groups = service.grouped()
    except CatalogException as exc:
        logger.error("Error fetching catalogs: %s", exc)
        await message.answer(render_catalog_error())
        return

    await message.answer(
        render_catalog_index(groups),
        parse_mode="HTML",
        reply_markup=build_catalogs_keyboard(groups, service.base_url).as_markup(
            resize_keyboard=True
        ),
    )


@router.message(CommandStart())
@router.message(Command("catalogs"))
async def catalogs_command(message: types.Message) -> None:
    await send_catalogs(message)


@router.callback_query(F.data == CB_VIEW_CATALOGS)
async def catalogs_callback(callback: types.CallbackQuery) -> None:
    if callback.message:
        await send_catalogs(callback.message)
    await callback.answer()

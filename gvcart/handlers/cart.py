"""Cart view and editing handlers.

Contains the unified ``show_cart`` helper and every handler that changes
or refreshes the cart contents.
"""
from __future__ import annotations

import json
from typing import Callable

from aiogram import F, Router, types
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command

from gvcart.core.constants import (
    CB_CART_DEC,
    CB_CART_INC,
    CB_CART_NOOP,
    CB_CART_PAGE,
    CB_CART_REMOVE,
    CB_CART_SUBMIT,
    CB_VIEW_CART,
)
from gvcart.core.exceptions import (
    CartItemNotFoundException,
    StorageException,
    ValidationException,
)
from gvcart.core.money import format_money
from gvcart.keyboards.cart import build_submit_link_keyboard
from gvcart.logging_config import logger
from gvcart.services.cart_presenter import CartPresenter, CartScreen
from gvcart.templates.cart import esc
from gvcart.texts import get_text

from . import common

router = Router(name="cart")


async def _edit_or_answer(callback: types.CallbackQuery, screen: CartScreen) -> None:
    try:
        await callback.message.edit_text(
            screen.text, parse_mode="HTML", reply_markup=screen.keyboard
        )
    except TelegramBadRequest as exc:
        if "message is not modified" in str(exc):
            return
        await callback.message.answer(screen.text, parse_mode="HTML", reply_markup=screen.keyboard)


async def show_cart(
    event: types.Message | types.CallbackQuery,
    is_callback: bool = False,
) -> None:
    """Public helper to display the current cart of the event's user."""
    if not event.from_user:
        if is_callback and isinstance(event, types.CallbackQuery):
            await event.answer()
        return

    try:
        screen = common.presenter_for(event.from_user.id).render()
    except StorageException as exc:
        logger.error("Cannot render cart for user %s: %s", event.from_user.id, exc)
        if isinstance(event, types.CallbackQuery):
            await event.answer(get_text("cart_storage_error"), show_alert=True)
        else:
            await event.answer(get_text("cart_storage_error"))
        return

    if is_callback and isinstance(event, types.CallbackQuery):
        await _edit_or_answer(event, screen)
        await event.answer()
    else:
        await event.answer(screen.text, parse_mode="HTML", reply_markup=screen.keyboard)


async def _run_item_event(
    callback: types.CallbackQuery,
    prefix: str,
    action: Callable[[CartPresenter, str], CartScreen],
) -> None:
    """Resolve the item token, apply the action and refresh the cart message."""
    if not callback.message or not callback.from_user:
        await callback.answer()
        return

    token = common.token_from(callback.data, prefix)
    presenter = common.presenter_for(callback.from_user.id)
    try:
        screen = action(presenter, token)
    except CartItemNotFoundException:
        await callback.answer(get_text("cart_item_not_found"), show_alert=True)
        try:
            await _edit_or_answer(callback, presenter.render())
        except StorageException as exc:
            logger.error("Cannot render cart for user %s: %s", callback.from_user.id, exc)
        return
    except StorageException as exc:
        logger.error("Cart update failed for user %s: %s", callback.from_user.id, exc)
        await callback.answer(get_text("cart_storage_error"), show_alert=True)
        return

    await _edit_or_answer(callback, screen)
    await callback.answer()


@router.message(Command("cart"))
@router.message(F.text == get_text("my_cart"))
async def show_cart_message(message: types.Message) -> None:
    await show_cart(message, is_callback=False)


@router.callback_query(F.data == CB_VIEW_CART)
async def view_cart_callback(callback: types.CallbackQuery) -> None:
    if not callback.message or not callback.from_user:
        await callback.answer()
        return
    await show_cart(callback, is_callback=True)


@router.callback_query(F.data.startswith(CB_CART_INC))
async def cart_quantity_increase(callback: types.CallbackQuery) -> None:
    await _run_item_event(callback, CB_CART_INC, lambda p, token: p.increment(token))


@router.callback_query(F.data.startswith(CB_CART_DEC))
async def cart_quantity_decrease(callback: types.CallbackQuery) -> None:
    await _run_item_event(callback, CB_CART_DEC, lambda p, token: p.decrement(token))


@router.callback_query(F.data.startswith(CB_CART_REMOVE))
async def cart_remove_item(callback: types.CallbackQuery) -> None:
    await _run_item_event(callback, CB_CART_REMOVE, lambda p, token: p.remove(token))


@router.callback_query(F.data.startswith(CB_CART_PAGE))
async def cart_page(callback: types.CallbackQuery) -> None:
    if not callback.message or not callback.from_user:
        await callback.answer()
        return

    try:
        page = int(common.token_from(callback.data, CB_CART_PAGE))
    except ValueError:
        page = 0

    try:
        screen = common.presenter_for(callback.from_user.id).render(page=page)
    except StorageException as exc:
        logger.error("Cannot render cart for user %s: %s", callback.from_user.id, exc)
        await callback.answer(get_text("cart_storage_error"), show_alert=True)
        return

    await _edit_or_answer(callback, screen)
    await callback.answer()


@router.callback_query(F.data == CB_CART_SUBMIT)
async def cart_submit(callback: types.CallbackQuery) -> None:
    if not callback.message or not callback.from_user:
        await callback.answer()
        return

    presenter = common.presenter_for(callback.from_user.id)
    try:
        link = presenter.submit()
    except StorageException as exc:
        logger.error("Order submission failed for user %s: %s", callback.from_user.id, exc)
        await callback.answer(get_text("cart_storage_error"), show_alert=True)
        return

    if link is None:
        await callback.answer(
            get_text("cart_submit_below_minimum", minimum=format_money(presenter.minimum_order)),
            show_alert=True,
        )
        return

    await callback.message.answer(
        get_text("cart_submit_ready"),
        reply_markup=build_submit_link_keyboard(link).as_markup(),
    )
    await callback.answer()


@router.callback_query(F.data == CB_CART_NOOP)
async def cart_noop(callback: types.CallbackQuery) -> None:
    await callback.answer()


@router.message(F.web_app_data)
async def add_from_catalog(message: types.Message) -> None:
    """Add a product sent by a catalog page.

    Payload: ``{"action": "add", "catalogName": str, "product": {sku, name, price, image}}``
    """
    if not message.from_user or not message.web_app_data:
        return

    try:
        payload = json.loads(message.web_app_data.data)
        if not isinstance(payload, dict) or payload.get("action", "add") != "add":
            raise ValidationException("Unsupported catalog payload")
        product = payload.get("product")
        if not isinstance(product, dict):
            raise ValidationException("Catalog payload has no product")
        item = common.cart_store_for(message.from_user.id).add_item(
            product, payload.get("catalogName", "")
        )
    except (json.JSONDecodeError, ValidationException) as exc:
        logger.warning("Rejected catalog payload from user %s: %s", message.from_user.id, exc)
        await message.answer(get_text("cart_add_invalid"))
        return
    except StorageException as exc:
        logger.error("Cannot add product for user %s: %s", message.from_user.id, exc)
        await message.answer(get_text("cart_storage_error"))
        return

    await message.answer(
        get_text("cart_item_added", name=esc(item.name or item.sku), quantity=item.quantity),
        parse_mode="HTML",
    )

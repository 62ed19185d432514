"""Cart keyboards: per-item quantity controls and the submit button."""
from __future__ import annotations

from aiogram.utils.keyboard import InlineKeyboardBuilder

from gvcart.core.constants import (
    CB_CART_DEC,
    CB_CART_INC,
    CB_CART_NOOP,
    CB_CART_PAGE,
    CB_CART_REMOVE,
    CB_CART_SUBMIT,
    CB_VIEW_CATALOGS,
    MAX_BUTTON_TITLE_LENGTH,
    MAX_CALLBACK_DATA_LENGTH,
)
from gvcart.core.money import format_money
from gvcart.domain.cart import OrderSummary
from gvcart.texts import get_text


def _short_title(title: str) -> str:
    if len(title) > MAX_BUTTON_TITLE_LENGTH:
        return title[:MAX_BUTTON_TITLE_LENGTH] + "..."
    return title


def _callback(prefix: str, value: object) -> str:
    data = f"{prefix}{value}"
    if len(data.encode("utf-8")) > MAX_CALLBACK_DATA_LENGTH:
        raise ValueError(f"Callback data exceeds {MAX_CALLBACK_DATA_LENGTH} bytes: {data!r}")
    return data


def build_cart_keyboard(summary: OrderSummary, page: int = 0) -> InlineKeyboardBuilder:
    """Build the cart keyboard from a derived summary.

    Only the items of ``page`` get controls, so the button count stays
    bounded however large the cart grows.
    """
    kb = InlineKeyboardBuilder()

    if summary.is_empty:
        kb.button(text=get_text("cart_browse_button"), callback_data=CB_VIEW_CATALOGS)
        return kb

    cart_page = summary.page(page)
    adjust_pattern: list[int] = []
    for group in cart_page.groups:
        for item in group.items:
            token = item.token
            # Label row, then: [ - ] [qty] [ + ] [ 🗑 ]
            kb.button(text=_short_title(item.name or item.sku), callback_data=CB_CART_NOOP)
            kb.button(text="-", callback_data=_callback(CB_CART_DEC, token))
            kb.button(text=str(item.quantity), callback_data=CB_CART_NOOP)
            kb.button(text="+", callback_data=_callback(CB_CART_INC, token))
            kb.button(text="🗑", callback_data=_callback(CB_CART_REMOVE, token))
            adjust_pattern.extend([1, 4])

    if cart_page.is_paged:
        # ◀ wraps to the last page, ▶ to the first
        kb.button(text="◀", callback_data=_callback(CB_CART_PAGE, (cart_page.number - 1) % cart_page.count))
        kb.button(text=f"{cart_page.number + 1}/{cart_page.count}", callback_data=CB_CART_NOOP)
        kb.button(text="▶", callback_data=_callback(CB_CART_PAGE, (cart_page.number + 1) % cart_page.count))
        adjust_pattern.append(3)

    if summary.can_submit:
        kb.button(text=get_text("cart_submit_button"), callback_data=CB_CART_SUBMIT)
    else:
        kb.button(
            text=get_text("cart_submit_locked_button", minimum=format_money(summary.minimum_order)),
            callback_data=CB_CART_NOOP,
        )
    kb.button(text=get_text("cart_browse_button"), callback_data=CB_VIEW_CATALOGS)
    adjust_pattern.extend([1, 1])

    kb.adjust(*adjust_pattern)
    return kb


def build_submit_link_keyboard(link: str) -> InlineKeyboardBuilder:
    kb = InlineKeyboardBuilder()
    kb.button(text=get_text("cart_open_whatsapp_button"), url=link)
    return kb

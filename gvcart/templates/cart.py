"""Text templates for the cart screen and the order message."""
from __future__ import annotations

import html
from decimal import Decimal
from typing import Iterable

from gvcart.core.constants import MAX_TEXT_TITLE_LENGTH, PROGRESS_BAR_WIDTH
from gvcart.core.money import format_money
from gvcart.domain.cart import LineItem, OrderSummary
from gvcart.texts import get_text


def esc(val: object) -> str:
    """HTML-escape helper used in cart texts."""
    if val is None:
        return ""
    return html.escape(str(val))


def progress_bar(percentage: Decimal, width: int = PROGRESS_BAR_WIDTH) -> str:
    filled = int(percentage * width / 100)
    filled = max(0, min(width, filled))
    return "▓" * filled + "░" * (width - filled)


def render_empty_cart() -> str:
    return get_text("cart_empty")


def clip(title: str, limit: int = MAX_TEXT_TITLE_LENGTH) -> str:
    if len(title) > limit:
        return title[:limit] + "…"
    return title


def render_cart(summary: OrderSummary, page: int = 0) -> str:
    """Cart screen: catalog groups of one page, then the order summary block.

    The summary always covers the whole cart.
    """
    if summary.is_empty:
        return render_empty_cart()

    cart_page = summary.page(page)
    lines: list[str] = [get_text("cart_title")]
    if cart_page.is_paged:
        lines.append(get_text("cart_page", number=cart_page.number + 1, count=cart_page.count))
    for group in cart_page.groups:
        lines.append("")
        lines.append(f"🏷 <b>{esc(clip(group.catalog_name))}</b>")
        for item in group.items:
            lines.append(f"• <b>{esc(clip(item.name or item.sku))}</b> × {item.quantity}")
            lines.append(
                "   "
                + get_text("cart_unit_price", price=format_money(item.unit_price))
                + " · "
                + get_text("cart_subtotal", subtotal=format_money(item.subtotal))
            )

    lines.append("\n" + "─" * 25)
    lines.extend(render_summary_block(summary))
    return "\n".join(lines)


def render_summary_block(summary: OrderSummary) -> list[str]:
    minimum = format_money(summary.minimum_order)
    lines = [
        get_text("cart_summary_title"),
        get_text("cart_total", total=format_money(summary.total)),
        get_text(
            "cart_progress",
            bar=progress_bar(summary.percentage),
            percentage=int(summary.percentage),
        ),
    ]
    if summary.remaining > 0:
        lines.append(
            get_text("cart_minimum_away", remaining=format_money(summary.remaining), minimum=minimum)
        )
    else:
        lines.append(get_text("cart_minimum_reached"))
    return lines


def render_order_message(items: Iterable[LineItem], total: Decimal) -> str:
    """Plain-text order message for the submission channel."""
    items = list(items)
    if not items:
        return get_text("order_empty")

    lines = [get_text("order_greeting"), ""]
    for item in items:
        lines.append(get_text("order_item_sku", sku=item.sku))
        lines.append(get_text("order_item_catalog", catalog=item.catalog_name))
        lines.append(get_text("order_item_product", name=item.name))
        lines.append(get_text("order_item_quantity", quantity=item.quantity))
        lines.append("")
    lines.append(get_text("order_total", total=format_money(total, grouping=False)))
    return "\n".join(lines)

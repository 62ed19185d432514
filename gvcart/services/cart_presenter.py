"""Cart presenter: derives the order summary, renders the cart screen and
translates cart UI events into store mutations.

Every event runs the same pipeline: mutate the store, re-derive the summary
from the persisted cart, re-render the whole screen.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from aiogram.types import InlineKeyboardMarkup

from gvcart.core.cart_store import CartStore
from gvcart.core.constants import CART_PAGE_SIZE, MIN_QUANTITY, MINIMUM_ORDER
from gvcart.core.exceptions import CartItemNotFoundException
from gvcart.core.money import Number, to_decimal
from gvcart.domain.cart import Cart, CatalogGroup, LineItem, OrderSummary, group_label
from gvcart.integrations.order_channel import OrderChannel, WhatsAppOrderChannel
from gvcart.keyboards.cart import build_cart_keyboard
from gvcart.logging_config import logger
from gvcart.templates.cart import render_cart, render_order_message


def derive_view_model(cart: Cart, minimum_order: Number = MINIMUM_ORDER) -> OrderSummary:
    """Compute totals, minimum-order progress and catalog groups. No side effects."""
    minimum = to_decimal(minimum_order)
    total = sum((item.unit_price * item.quantity for item in cart.values()), Decimal("0"))

    if minimum <= 0:
        percentage = Decimal("100")
    else:
        percentage = max(Decimal("0"), min(total / minimum * 100, Decimal("100")))

    groups: dict[str, CatalogGroup] = {}
    for item in cart.values():
        label = group_label(item)
        if label not in groups:
            groups[label] = CatalogGroup(catalog_name=label)
        groups[label].items.append(item)

    return OrderSummary(
        total=total,
        remaining=minimum - total,
        percentage=percentage,
        minimum_order=minimum,
        groups=list(groups.values()),
        item_count=sum(item.quantity for item in cart.values()),
    )


def format_for_submission(cart: Cart) -> str:
    """Plain-text order summary in cart order, or the empty-cart sentence."""
    items = list(cart.values())
    total = sum((item.subtotal for item in items), Decimal("0"))
    return render_order_message(items, total)


@dataclass
class CartScreen:
    """Rendered cart: message text, inline keyboard and the summary behind them."""

    text: str
    keyboard: InlineKeyboardMarkup
    summary: OrderSummary
    page: int = 0

    @property
    def submit_enabled(self) -> bool:
        return self.summary.can_submit


class CartPresenter:
    """Binds one cart store to its screen and order channel.

    Args:
        store: Cart store of the current customer
        minimum_order: Order threshold below which submission is disabled
        channel: Outbound order channel, WhatsApp link builder by default
    """

    def __init__(
        self,
        store: CartStore,
        minimum_order: Number = MINIMUM_ORDER,
        channel: OrderChannel | None = None,
    ) -> None:
        self.store = store
        self.minimum_order = to_decimal(minimum_order)
        self.channel: OrderChannel = channel or WhatsAppOrderChannel()

    def derive_view_model(self, cart: Cart | None = None) -> OrderSummary:
        if cart is None:
            cart = self.store.get_contents()
        return derive_view_model(cart, self.minimum_order)

    def render(self, cart: Cart | None = None, page: int = 0) -> CartScreen:
        summary = self.derive_view_model(cart)
        page = summary.page(page).number
        return CartScreen(
            text=render_cart(summary, page),
            keyboard=build_cart_keyboard(summary, page).as_markup(),
            summary=summary,
            page=page,
        )

    def format_for_submission(self, cart: Cart | None = None) -> str:
        if cart is None:
            cart = self.store.get_contents()
        return format_for_submission(cart)

    # ------------------------------------------------------------------
    # UI events
    # ------------------------------------------------------------------

    def _resolve(self, token: str) -> tuple[LineItem, int]:
        """Find the item behind a token and the cart page it is shown on."""
        item = self.store.find_by_token(token)
        if item is None:
            raise CartItemNotFoundException(token)
        keys = [line.key for line in self.derive_view_model().line_items()]
        return item, keys.index(item.key) // CART_PAGE_SIZE

    def _apply(self, mutation: Callable[[], object], page: int) -> CartScreen:
        """Run a store mutation and re-render from the persisted cart."""
        mutation()
        return self.render(page=page)

    def increment(self, token: str) -> CartScreen:
        item, page = self._resolve(token)
        return self._apply(
            lambda: self.store.set_quantity(item.sku, item.catalog_name, item.quantity + 1), page
        )

    def decrement(self, token: str) -> CartScreen:
        item, page = self._resolve(token)
        if item.quantity > MIN_QUANTITY:
            return self._apply(
                lambda: self.store.set_quantity(item.sku, item.catalog_name, item.quantity - 1), page
            )
        return self._apply(lambda: self.store.remove_item(item.sku, item.catalog_name), page)

    def remove(self, token: str) -> CartScreen:
        item, page = self._resolve(token)
        return self._apply(lambda: self.store.remove_item(item.sku, item.catalog_name), page)

    def submit(self) -> str | None:
        """Hand the order text to the channel when the minimum is reached.

        Returns the channel link, or None when submission is disabled.
        """
        cart = self.store.get_contents()
        summary = self.derive_view_model(cart)
        if not summary.can_submit:
            logger.info(
                "Order submission blocked: total %s below minimum %s",
                summary.total,
                summary.minimum_order,
            )
            return None
        return self.channel.submit(format_for_submission(cart))

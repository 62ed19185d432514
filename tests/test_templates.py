from __future__ import annotations

from decimal import Decimal

from gvcart.core.money import format_money, round_money, to_decimal, to_json_number
from gvcart.domain.catalog import Catalog
from gvcart.domain.cart import LineItem
from gvcart.services.cart_presenter import derive_view_model
from gvcart.templates.cart import progress_bar, render_cart, render_order_message
from gvcart.templates.catalogs import render_catalog_error, render_catalog_index


def test_money_helpers() -> None:
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("oops") == Decimal("0")
    assert round_money("2.345") == Decimal("2.35")
    assert format_money(12000) == "₹12,000.00"
    assert format_money(1500, grouping=False) == "₹1500.00"
    assert to_json_number(Decimal("500")) == 500
    assert isinstance(to_json_number(Decimal("500")), int)
    assert to_json_number(Decimal("19.99")) == 19.99


def test_progress_bar_bounds() -> None:
    assert progress_bar(Decimal("0")) == "░" * 10
    assert progress_bar(Decimal("55")) == "▓" * 5 + "░" * 5
    assert progress_bar(Decimal("100")) == "▓" * 10


def test_cart_text_escapes_names() -> None:
    item = LineItem(sku="A1", catalog_name="<Tea & Co>", name="<b>Mint</b>", unit_price=1, image="")

    text = render_cart(derive_view_model({item.key: item}, 12000))

    assert "&lt;Tea &amp; Co&gt;" in text
    assert "&lt;b&gt;Mint&lt;/b&gt;" in text
    assert "<Tea & Co>" not in text


def test_cart_text_shows_remaining_amount() -> None:
    item = LineItem(sku="A1", catalog_name="Tea", name="Tea", unit_price=1500, image="")

    text = render_cart(derive_view_model({item.key: item}, 12000))

    assert "You are <b>₹10,500.00</b> away from the minimum order of ₹12,000.00" in text
    assert "12%" in text


def test_order_message_keeps_raw_names() -> None:
    item = LineItem(sku="A1", catalog_name="Tea & Co", name="Mint <fresh>", unit_price=2, image="", quantity=3)

    message = render_order_message([item], item.subtotal)

    assert "Catalog: Tea & Co" in message
    assert "Product: Mint <fresh>" in message
    assert message.endswith("Total Order Value: ₹6.00")


def test_catalog_index_lists_categories() -> None:
    groups = {
        "Herbs": [Catalog(title="Basil", path="basil.html")],
        "Tea": [Catalog(title="Green", path="green.html")],
    }

    text = render_catalog_index(groups)

    assert text.index("<b>Herbs</b>") < text.index("<b>Tea</b>")
    assert "• Basil" in text


def test_catalog_index_empty_and_error() -> None:
    assert render_catalog_index({}) == "No catalogs available."
    assert render_catalog_error() == "Error loading catalogs."

from __future__ import annotations

from decimal import Decimal

import pytest

from gvcart.core.constants import MAX_QUANTITY, UNKNOWN_CATALOG
from gvcart.core.exceptions import ValidationException
from gvcart.domain.cart import (
    LineItem,
    Product,
    cart_key,
    coerce_quantity,
    group_label,
    item_token,
    parse_price,
)


def test_cart_key_trims_both_components() -> None:
    assert cart_key(" A1 ", " Tea ") == "Tea-A1"
    assert cart_key("A1", "Tea") == cart_key("A1 ", "  Tea")


def test_cart_key_with_empty_catalog() -> None:
    assert cart_key("A1", None) == "-A1"
    assert cart_key("A1", "   ") == "-A1"


def test_item_token_is_short_and_stable() -> None:
    token = item_token("Tea-A1")
    assert len(token) == 12
    assert token == item_token("Tea-A1")
    assert token != item_token("Herbs-A1")


@pytest.mark.parametrize("value,expected", [(3, 3), (2.0, 2), ("4", 4), (" 5 ", 5), (0, 0), (-5, -5)])
def test_coerce_quantity_accepts_integral_values(value, expected) -> None:
    assert coerce_quantity(value) == expected


@pytest.mark.parametrize("value", [2.5, "two", "", None, True, [1]])
def test_coerce_quantity_rejects_non_integral(value) -> None:
    with pytest.raises(ValidationException):
        coerce_quantity(value)


def test_coerce_quantity_clamps_to_maximum() -> None:
    assert coerce_quantity(MAX_QUANTITY + 50) == MAX_QUANTITY


def test_parse_price() -> None:
    assert parse_price(500) == Decimal("500")
    assert parse_price("12.50") == Decimal("12.50")
    assert parse_price(0.1) == Decimal("0.1")
    assert parse_price(0) == Decimal("0")


@pytest.mark.parametrize("value", [-1, "-0.01", "abc", None, True, "NaN", float("inf"), {}])
def test_parse_price_rejects_invalid(value) -> None:
    with pytest.raises(ValidationException):
        parse_price(value)


def test_product_normalizes_sku_and_requires_it() -> None:
    product = Product(sku="  A1 ", name="Tea", unit_price="500")
    assert product.sku == "A1"
    assert product.unit_price == Decimal("500")

    with pytest.raises(ValidationException):
        Product(sku="   ", name="Tea", unit_price=500)


def test_product_from_mapping_price_aliases() -> None:
    assert Product.from_mapping({"sku": "A1", "price": 10}).unit_price == Decimal("10")
    assert Product.from_mapping({"sku": "A1", "unitPrice": 11}).unit_price == Decimal("11")
    assert Product.from_mapping({"sku": "A1", "unit_price": 12}).unit_price == Decimal("12")

    with pytest.raises(ValidationException):
        Product.from_mapping({"sku": "A1", "name": "Tea"})


def test_line_item_serialization_uses_stored_field_names() -> None:
    item = LineItem(
        sku="A1", catalog_name="Tea", name="Green", unit_price=Decimal("12.5"), image="x.png", quantity=2
    )

    assert item.to_dict() == {
        "sku": "A1",
        "catalogName": "Tea",
        "name": "Green",
        "price": 12.5,
        "image": "x.png",
        "quantity": 2,
    }
    assert item.subtotal == Decimal("25.0")
    assert item.key == "Tea-A1"


def test_line_item_from_dict_rejects_malformed_records() -> None:
    with pytest.raises(KeyError):
        LineItem.from_dict({"sku": "A1"})
    with pytest.raises(ValueError):
        LineItem.from_dict({"sku": "A1", "quantity": 0})
    with pytest.raises(ValueError):
        LineItem.from_dict({"sku": "A1", "quantity": 1, "price": [1]})


@pytest.mark.parametrize(
    "record",
    [
        {"sku": "A1", "quantity": float("inf"), "price": 500},
        {"sku": "A1", "quantity": float("nan"), "price": 500},
        {"sku": "A1", "quantity": 2.5, "price": 500},
        {"sku": "A1", "quantity": True, "price": 500},
        {"sku": "A1", "quantity": 1, "price": float("nan")},
        {"sku": "A1", "quantity": 1, "price": float("inf")},
        {"sku": "A1", "quantity": 1, "price": "abc"},
        {"sku": "A1", "quantity": 1, "price": -10},
        {"sku": "A1", "quantity": 1, "price": None},
    ],
)
def test_line_item_from_dict_rejects_unusable_numbers(record) -> None:
    with pytest.raises(ValueError):
        LineItem.from_dict(record)


def test_line_item_from_dict_reads_valid_record() -> None:
    item = LineItem.from_dict({"sku": " A1 ", "catalogName": "Tea", "quantity": 2.0, "price": "19.99"})

    assert item.key == "Tea-A1"
    assert item.quantity == 2
    assert item.unit_price == Decimal("19.99")


def test_group_label_falls_back_to_unknown_catalog() -> None:
    item = LineItem(sku="A1", catalog_name="", name="Tea", unit_price=1, image="")
    assert group_label(item) == UNKNOWN_CATALOG

"""Cart domain model: line items, identity keys and the derived order summary."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping

from gvcart.core.constants import (
    CART_KEY_SEPARATOR,
    CART_PAGE_SIZE,
    ITEM_TOKEN_LENGTH,
    MAX_QUANTITY,
    MIN_QUANTITY,
    UNKNOWN_CATALOG,
)
from gvcart.core.exceptions import ValidationException
from gvcart.core.money import to_decimal, to_json_number


def normalize_identity(value: Any) -> str:
    """Canonical form of a sku or catalog name: string, surrounding whitespace removed."""
    if value is None:
        return ""
    return str(value).strip()


def cart_key(sku: Any, catalog_name: Any) -> str:
    """Build the CartKey ``<catalog>-<sku>`` from normalized components."""
    return f"{normalize_identity(catalog_name)}{CART_KEY_SEPARATOR}{normalize_identity(sku)}"


def item_token(key: str) -> str:
    """Short stable token for a CartKey, safe for Telegram callback data."""
    return hashlib.sha1(key.encode("utf-8")).hexdigest()[:ITEM_TOKEN_LENGTH]


def parse_price(value: Any) -> Decimal:
    """Validate a unit price: numeric and non-negative."""
    if isinstance(value, bool) or value is None:
        raise ValidationException(f"Invalid price: {value!r}")
    if isinstance(value, str):
        try:
            Decimal(value.strip())
        except InvalidOperation:
            raise ValidationException(f"Invalid price: {value!r}")
    elif not isinstance(value, (int, float, Decimal)):
        raise ValidationException(f"Invalid price: {value!r}")
    price = to_decimal(value.strip() if isinstance(value, str) else value)
    if not price.is_finite() or price < 0:
        raise ValidationException(f"Price cannot be negative: {value!r}")
    return price


def coerce_quantity(value: Any) -> int:
    """Validate a requested quantity.

    Only integral values are accepted; ``2.0`` becomes ``2`` while ``2.5``,
    booleans and non-numeric strings are rejected. Values above
    ``MAX_QUANTITY`` are clamped. Zero and negatives pass through so callers
    can treat them as removal.
    """
    if isinstance(value, bool):
        raise ValidationException(f"Quantity must be an integer, got {value!r}")
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, (float, Decimal)):
        if not Decimal(str(value)).is_finite() or value != int(value):
            raise ValidationException(f"Quantity must be an integer, got {value!r}")
        quantity = int(value)
    elif isinstance(value, str):
        try:
            quantity = int(value.strip())
        except ValueError:
            raise ValidationException(f"Quantity must be an integer, got {value!r}")
    else:
        raise ValidationException(f"Quantity must be an integer, got {value!r}")
    return min(quantity, MAX_QUANTITY)


@dataclass
class Product:
    """Product as supplied by a catalog page when it is added to the cart."""

    sku: str
    name: str
    unit_price: Decimal
    image: str = ""

    def __post_init__(self) -> None:
        self.sku = normalize_identity(self.sku)
        if not self.sku:
            raise ValidationException("Product sku must not be empty")
        self.name = str(self.name or "")
        self.unit_price = parse_price(self.unit_price)
        self.image = str(self.image or "")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Product:
        """Create from a catalog payload. ``price`` and ``unitPrice`` alias ``unit_price``."""
        if "unit_price" in data:
            price = data["unit_price"]
        elif "unitPrice" in data:
            price = data["unitPrice"]
        else:
            price = data.get("price")
        return cls(
            sku=data.get("sku", ""),
            name=data.get("name", ""),
            unit_price=price,
            image=data.get("image", ""),
        )


@dataclass
class LineItem:
    """One entry per distinct (catalog, product) pair in the cart."""

    sku: str
    catalog_name: str
    name: str
    unit_price: Decimal
    image: str
    quantity: int = 1

    def __post_init__(self) -> None:
        self.unit_price = to_decimal(self.unit_price)

    @property
    def key(self) -> str:
        return cart_key(self.sku, self.catalog_name)

    @property
    def token(self) -> str:
        return item_token(self.key)

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON record."""
        return {
            "sku": self.sku,
            "catalogName": self.catalog_name,
            "name": self.name,
            "price": to_json_number(self.unit_price),
            "image": self.image,
            "quantity": int(self.quantity),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LineItem:
        """Create from a persisted record.

        Stored values go through the same checks as freshly added products,
        so ``NaN``/``Infinity`` numbers and negative prices are rejected.

        Raises KeyError or ValueError for malformed records.
        """
        raw_quantity = data["quantity"]
        try:
            quantity = coerce_quantity(raw_quantity)
            unit_price = parse_price(data.get("price", 0))
        except ValidationException as exc:
            raise ValueError(exc.message) from exc
        if quantity < MIN_QUANTITY:
            raise ValueError(f"Stored quantity must be positive, got {raw_quantity!r}")
        return cls(
            sku=normalize_identity(data["sku"]),
            catalog_name=normalize_identity(data.get("catalogName")),
            name=str(data.get("name") or ""),
            unit_price=unit_price,
            image=str(data.get("image") or ""),
            quantity=quantity,
        )


# CartKey -> LineItem, in insertion order
Cart = Dict[str, LineItem]


@dataclass
class CatalogGroup:
    """Line items of one catalog, in first-seen order."""

    catalog_name: str
    items: List[LineItem] = field(default_factory=list)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))


@dataclass
class OrderSummary:
    """View model derived from a cart on every render. Never persisted."""

    total: Decimal
    remaining: Decimal
    percentage: Decimal
    minimum_order: Decimal
    groups: List[CatalogGroup]
    item_count: int

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @property
    def can_submit(self) -> bool:
        return not self.is_empty and self.total >= self.minimum_order

    def line_items(self) -> List[LineItem]:
        """All items in display order: by group, then first-seen."""
        return [item for group in self.groups for item in group.items]

    def page(self, number: int = 0, size: int = CART_PAGE_SIZE) -> CartPage:
        """Slice of the grouped items shown on one cart screen.

        Out-of-range page numbers are clamped to the nearest page.
        """
        items = self.line_items()
        count = max(1, -(-len(items) // size))
        number = max(0, min(number, count - 1))

        groups: List[CatalogGroup] = []
        for item in items[number * size:(number + 1) * size]:
            label = group_label(item)
            if not groups or groups[-1].catalog_name != label:
                groups.append(CatalogGroup(catalog_name=label))
            groups[-1].items.append(item)
        return CartPage(number=number, count=count, groups=groups)


@dataclass
class CartPage:
    """One screen worth of catalog groups. ``number`` is zero-based."""

    number: int
    count: int
    groups: List[CatalogGroup]

    @property
    def is_paged(self) -> bool:
        return self.count > 1


def group_label(item: LineItem) -> str:
    return item.catalog_name or UNKNOWN_CATALOG

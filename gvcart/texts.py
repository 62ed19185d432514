# User-facing texts for the cart bot

import logging

TEXTS = {
    # Catalog listing
    "catalogs_title": "🌿 <b>Green Vitality catalogs</b>",
    "catalogs_empty": "No catalogs available.",
    "catalogs_error": "Error loading catalogs.",
    "catalogs_hint": "Open a catalog, pick products and come back to 🛒 /cart",
    "view_catalog_button": "View Catalog",
    # Cart screen
    "my_cart": "🛒 Cart",
    "cart_title": "🛒 <b>Your cart</b>",
    "cart_empty": "🛒 Your cart is empty\n\nAdd products from our catalogs!",
    "cart_browse_button": "🌿 Browse catalogs",
    "cart_page": "Page {number} of {count}",
    "cart_unit_price": "{price} each",
    "cart_subtotal": "Subtotal: <b>{subtotal}</b>",
    "cart_summary_title": "📋 <b>Order summary</b>",
    "cart_total": "💵 Total: <b>{total}</b>",
    "cart_progress": "{bar} {percentage}%",
    "cart_minimum_away": "You are <b>{remaining}</b> away from the minimum order of {minimum}",
    "cart_minimum_reached": "✅ Minimum order reached!",
    "cart_submit_button": "📲 Place order on WhatsApp",
    "cart_submit_locked_button": "🔒 Minimum order {minimum}",
    "cart_open_whatsapp_button": "💬 Open WhatsApp",
    "cart_submit_ready": "Your order is ready. Tap the button below to send it to us on WhatsApp.",
    "cart_submit_below_minimum": "Minimum order is {minimum}",
    "cart_item_not_found": "❌ Item not found",
    "cart_storage_error": "❌ Cart is temporarily unavailable, please try again",
    "cart_item_added": "✅ {name} added to your cart ({quantity} in cart)",
    "cart_add_invalid": "❌ Could not add this product",
    # Submission message
    "order_greeting": "Hello! I would like to place an order for the following items:",
    "order_item_sku": "SKU: {sku}",
    "order_item_catalog": "Catalog: {catalog}",
    "order_item_product": "Product: {name}",
    "order_item_quantity": "Quantity: {quantity}",
    "order_total": "Total Order Value: {total}",
    "order_empty": "Your cart is empty.",
}


def get_text(key: str, **kwargs: object) -> str:
    """Return the text for ``key`` formatted with ``kwargs``.

    Unknown keys come back unchanged so a missing entry is visible in the UI.
    """
    text = TEXTS.get(key, key)
    if kwargs and text != key:
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError) as e:
            logging.warning(f"Format error in get_text: {e}, key={key}")
            return text
    return text

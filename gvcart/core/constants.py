"""Application-wide constants and configuration values.

Centralizes magic numbers and fixed labels used by the cart and the bot.
"""

# ============== CART ==============
CART_STORAGE_KEY = "greenvitality_cart"
CART_KEY_SEPARATOR = "-"
MIN_QUANTITY = 1
MAX_QUANTITY = 1000
CART_PAGE_SIZE = 8  # line items per cart screen

# ============== ORDER ==============
MINIMUM_ORDER = 12000  # currency units
CURRENCY_SYMBOL = "₹"
PROGRESS_BAR_WIDTH = 10

# ============== LABELS ==============
UNKNOWN_CATALOG = "Unknown Catalog"
UNCATEGORIZED = "Uncategorized"

# ============== CATALOGS ==============
DEFAULT_CATALOGS_PATH = "catalogs.json"

# ============== MESSAGE LIMITS ==============
MAX_CALLBACK_DATA_LENGTH = 64
ITEM_TOKEN_LENGTH = 12
MAX_BUTTON_TITLE_LENGTH = 25
MAX_TEXT_TITLE_LENGTH = 40

# ============== CALLBACK PREFIXES ==============
CB_CART_INC = "cart:inc:"
CB_CART_DEC = "cart:dec:"
CB_CART_REMOVE = "cart:rm:"
CB_CART_PAGE = "cart:page:"
CB_CART_SUBMIT = "cart:submit"
CB_CART_NOOP = "cart:noop"
CB_VIEW_CART = "view_cart"
CB_VIEW_CATALOGS = "view_catalogs"

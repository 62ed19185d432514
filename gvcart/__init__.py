"""Green Vitality catalogs cart: persistent multi-catalog cart and order summary bot."""

__version__ = "1.0.0"

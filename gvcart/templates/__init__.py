"""Text templates for cart and catalog screens."""

"""Core package: configuration, constants, exceptions and the cart store."""

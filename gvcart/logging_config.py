"""Shared logger for the cart bot."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("gvcart")


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging once for the bot process."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    # aiogram event logs are noisy at INFO
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)

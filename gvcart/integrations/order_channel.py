"""Outbound order channel: WhatsApp click-to-chat links."""
from __future__ import annotations

import re
from typing import Protocol
from urllib.parse import quote

from gvcart.logging_config import logger

WHATSAPP_BASE_URL = "https://wa.me/"


class OrderChannel(Protocol):
    def submit(self, text: str) -> str:
        """Hand over the order text and return the link the customer opens."""
        ...


class WhatsAppOrderChannel:
    """Builds ``wa.me`` links carrying a pre-filled order message."""

    def __init__(self, phone: str = "") -> None:
        # wa.me accepts digits only, no "+" or separators
        self.phone = re.sub(r"\D", "", phone or "")

    def build_link(self, text: str) -> str:
        return f"{WHATSAPP_BASE_URL}{self.phone}?text={quote(text, safe='')}"

    def submit(self, text: str) -> str:
        link = self.build_link(text)
        logger.info("Order summary handed to WhatsApp channel (%d chars)", len(text))
        return link

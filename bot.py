"""
Green Vitality cart bot - main module.

Browses the catalog index, keeps a per-user cart and hands finished
orders over to WhatsApp.
"""
from __future__ import annotations

import asyncio
import sys

from gvcart.core.bootstrap import build_application
from gvcart.core.config import load_settings
from gvcart.core.exceptions import ConfigurationException
from gvcart.logging_config import logger, setup_logging


async def main() -> None:
    """Main bot entry point."""
    settings = load_settings()
    setup_logging(settings.log_level)

    bot, dp, _ = build_application(settings)

    logger.info("=" * 50)
    logger.info("Starting Green Vitality cart bot (polling)")
    logger.info(f"Minimum order: {settings.cart.minimum_order}")
    logger.info(f"Catalogs: {settings.catalogs.path}")
    logger.info("=" * 50)

    try:
        await bot.delete_webhook(drop_pending_updates=True)
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()


def run() -> None:
    """Console entry point."""
    try:
        asyncio.run(main())
    except ConfigurationException as e:
        logger.error(f"Configuration error: {e.message}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


if __name__ == "__main__":
    run()

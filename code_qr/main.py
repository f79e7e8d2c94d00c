"""Code QR Bot - Main Entry Point."""

import sys

from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
)

from .config import BOT_TOKEN, LOG_LEVEL
from .adapters import TelegramBotAdapter, QRCodeAdapter, StdoutAdapter
from .form import FormRegistry
from .handlers import COMMAND_HANDLERS, CodeHandler


def main() -> None:
    """Main bot initialization."""
    # Validate config (early return)
    if not BOT_TOKEN:
        print("ERROR: BOT_TOKEN not set", file=sys.stderr)
        sys.exit(1)

    # Mount adapters
    logger = StdoutAdapter(level=LOG_LEVEL)
    messaging = TelegramBotAdapter(bot_token=BOT_TOKEN)
    forms = FormRegistry(encoder=QRCodeAdapter(), logger=logger)

    logger.log("info", "Starting code QR bot")

    # Concurrent updates: rapid edits may race, forms drop stale results
    app = (
        Application.builder()
        .token(BOT_TOKEN)
        .concurrent_updates(True)
        .build()
    )

    # Register command handlers (table-driven)
    for command, handler_class in COMMAND_HANDLERS.items():
        if command == 'start':
            handler = handler_class(messaging, logger)
        elif command == 'clear':
            handler = handler_class(forms, messaging, logger)
        else:
            continue

        app.add_handler(CommandHandler(command, handler.handle))
        logger.log("info", f"Registered handler: /{command}")

    code_handler = CodeHandler(forms, messaging, logger)
    app.add_handler(
        MessageHandler(filters.TEXT & ~filters.COMMAND, code_handler.handle)
    )

    logger.log("info", "Bot started - polling for updates")
    app.run_polling(allowed_updates=['message'])


if __name__ == "__main__":
    main()

"""Handler for /start command."""

from telegram import Update
from telegram.ext import ContextTypes

from ..config import CODE_EXAMPLE, CODE_LENGTH
from ..interfaces import IMessagingProvider, ILogSink


class StartHandler:
    """Handler for /start command."""

    def __init__(self, messaging: IMessagingProvider, logger: ILogSink):
        self.messaging = messaging
        self.logger = logger

    async def handle(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /start command."""
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id

        self.logger.log("info", f"User {user_id} started bot")

        welcome_msg = (
            "🔳 QR Code Generator\n\n"
            f"Send a code of exactly {CODE_LENGTH} characters, "
            "letters and numbers only.\n"
            "Only uppercase letters (A-Z) and numbers (0-9) are kept; "
            "lowercase is converted automatically.\n\n"
            f"Example: {CODE_EXAMPLE}\n\n"
            "/clear - Clear the current code"
        )

        await self.messaging.send_message(chat_id, welcome_msg)

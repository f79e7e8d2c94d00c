"""Handler for /clear command."""

from telegram import Update
from telegram.ext import ContextTypes

from ..form import FormRegistry
from ..interfaces import IMessagingProvider, ILogSink
from ..view import render
from .auth import UNAUTHORIZED_MSG, is_authorized
from .reply import send_view


class ClearHandler:
    """Handler for /clear command - empties the chat's code field."""

    def __init__(
        self,
        forms: FormRegistry,
        messaging: IMessagingProvider,
        logger: ILogSink
    ):
        self.forms = forms
        self.messaging = messaging
        self.logger = logger

    async def handle(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /clear command."""
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id

        if not is_authorized(user_id):
            self.logger.log("warn", f"Unauthorized user {user_id} tried /clear")
            await self.messaging.send_message(chat_id, UNAUTHORIZED_MSG)
            return

        snapshot = self.forms.get(chat_id).reset()
        self.logger.log("info", f"Chat {chat_id} cleared code")

        try:
            await send_view(self.messaging, chat_id, render(snapshot))
        except Exception as e:
            self.logger.log("error", f"Clear reply failed: {e}")

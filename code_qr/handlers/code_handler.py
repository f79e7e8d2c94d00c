"""Handler for plain text messages - the code field."""

from telegram import Update
from telegram.ext import ContextTypes

from ..form import FormRegistry
from ..interfaces import IMessagingProvider, ILogSink
from ..view import render
from .auth import UNAUTHORIZED_MSG, is_authorized
from .reply import send_view


class CodeHandler:
    """Treats each text message as the new contents of the code field."""

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
        """Handle text message."""
        chat_id = update.effective_chat.id
        user_id = update.effective_user.id
        text = update.effective_message.text or ""

        if not is_authorized(user_id):
            self.logger.log("warn", f"Unauthorized user {user_id}")
            await self.messaging.send_message(chat_id, UNAUTHORIZED_MSG)
            return

        snapshot = await self.forms.get(chat_id).update(text)
        if snapshot is None:
            return  # superseded by a newer message

        self.logger.log(
            "info", f"Chat {chat_id} code {snapshot.code or '(empty)'}"
        )

        try:
            await send_view(self.messaging, chat_id, render(snapshot))
        except Exception as e:
            self.logger.log("error", f"Reply failed: {e}")
            await self.messaging.send_message(chat_id, f"❌ Error: {e}")

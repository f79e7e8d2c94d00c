"""Telegram Bot API adapter."""

import io
from typing import Optional

from telegram import Bot


class TelegramBotAdapter:
    """Adapter for Telegram Bot API."""

    def __init__(self, bot_token: str):
        self.bot = Bot(token=bot_token)

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send text message."""
        await self.bot.send_message(chat_id=chat_id, text=text)

    async def send_photo(
        self, chat_id: int, photo: bytes, caption: Optional[str] = None
    ) -> None:
        """Send image."""
        photo_file = io.BytesIO(photo)
        photo_file.name = "qr.png"
        await self.bot.send_photo(
            chat_id=chat_id,
            photo=photo_file,
            caption=caption
        )

"""Adapter implementations for code QR bot."""

from .telegram_bot_adapter import TelegramBotAdapter
from .qr_code_adapter import QRCodeAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'TelegramBotAdapter',
    'QRCodeAdapter',
    'StdoutAdapter',
]

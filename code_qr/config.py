"""Configuration management."""

import os


# Bot Configuration
BOT_TOKEN = os.getenv("BOT_TOKEN", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
# BOT_WHITELIST is read per request, see handlers.auth

# Form Configuration (fixed, not user-configurable)
CODE_LENGTH = 12
CODE_EXAMPLE = "T2020000PPPP"
FORM_LIMIT = 1000  # chats kept in memory, least recently used evicted

# QR rendering
QR_WIDTH = 256
QR_MARGIN = 2
QR_DARK = "#000000"
QR_LIGHT = "#FFFFFF"

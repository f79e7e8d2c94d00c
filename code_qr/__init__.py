"""Code QR Bot - 12-character code form that renders QR codes in Telegram."""

__version__ = "1.0.0"

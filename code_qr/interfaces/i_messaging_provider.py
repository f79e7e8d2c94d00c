"""Messaging provider interface (adapter pattern)."""

from typing import Optional, Protocol


class IMessagingProvider(Protocol):
    """Interface for messaging operations."""

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send text message."""
        ...

    async def send_photo(
        self, chat_id: int, photo: bytes, caption: Optional[str] = None
    ) -> None:
        """Send image with optional caption."""
        ...

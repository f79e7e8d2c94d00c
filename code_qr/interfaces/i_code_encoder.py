"""Code encoder interface (adapter pattern)."""

from dataclasses import dataclass
from typing import Protocol

from ..config import QR_DARK, QR_LIGHT, QR_MARGIN, QR_WIDTH


class EncodingError(Exception):
    """Raised when a complete code cannot be rendered."""


@dataclass(frozen=True)
class EncoderOptions:
    """Fixed rendering options for QR artifacts."""
    width: int = QR_WIDTH
    margin: int = QR_MARGIN
    dark: str = QR_DARK
    light: str = QR_LIGHT


class ICodeEncoder(Protocol):
    """Interface for asynchronous code-to-image encoding."""

    async def encode(self, code: str) -> bytes:
        """Render code as PNG bytes, raise on failure."""
        ...

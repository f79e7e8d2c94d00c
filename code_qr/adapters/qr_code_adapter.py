"""QR code encoder adapter."""

import asyncio
import io
from typing import Optional

import qrcode
from PIL import Image

from ..interfaces import EncoderOptions, EncodingError


class QRCodeAdapter:
    """Adapter for QR code generation."""

    def __init__(self, options: Optional[EncoderOptions] = None):
        self.options = options or EncoderOptions()

    def render(self, code: str) -> bytes:
        """Render code as a square PNG of the configured width."""
        qr = qrcode.QRCode(
            version=None,
            box_size=10,
            border=self.options.margin,
            error_correction=qrcode.constants.ERROR_CORRECT_M
        )
        qr.add_data(code)
        qr.make(fit=True)

        img = qr.make_image(
            fill_color=self.options.dark,
            back_color=self.options.light
        )
        img = img.convert("RGB")
        width = self.options.width
        img = img.resize((width, width), Image.NEAREST)

        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()

    async def encode(self, code: str) -> bytes:
        """Render PNG off the event loop."""
        if not code:
            raise EncodingError("code required")

        try:
            return await asyncio.to_thread(self.render, code)
        except Exception as e:
            raise EncodingError(f"render failed for {code}: {e}") from e

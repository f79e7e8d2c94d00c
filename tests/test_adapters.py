"""Unit tests for adapters."""

import io

import pytest
from unittest.mock import patch
from PIL import Image
from code_qr.adapters import QRCodeAdapter, StdoutAdapter
from code_qr.interfaces import EncoderOptions, EncodingError


def test_qr_code_adapter_generates_png():
    """QR adapter returns PNG bytes."""
    adapter = QRCodeAdapter()
    result = adapter.render("T2020000PPPP")

    assert isinstance(result, bytes)
    # PNG signature
    assert result[:8] == b'\x89PNG\r\n\x1a\n'


def test_qr_code_adapter_uses_fixed_width():
    """Rendered image is square at the configured width."""
    adapter = QRCodeAdapter()
    img = Image.open(io.BytesIO(adapter.render("A1B2C3D4E5F6")))

    assert img.size == (256, 256)
    # Corner sits in the white margin
    assert img.convert("RGB").getpixel((0, 0)) == (255, 255, 255)


def test_qr_code_adapter_different_inputs():
    """Different codes give different images."""
    adapter = QRCodeAdapter(EncoderOptions(width=128))

    qr1 = adapter.render("AAAAAAAAAAAA")
    qr2 = adapter.render("BBBBBBBBBBBB")

    assert qr1 != qr2
    assert Image.open(io.BytesIO(qr1)).size == (128, 128)


@pytest.mark.asyncio
async def test_qr_code_adapter_encode_async():
    """Async encode returns the same PNG as render."""
    adapter = QRCodeAdapter()

    result = await adapter.encode("T2020000PPPP")

    assert result == adapter.render("T2020000PPPP")


@pytest.mark.asyncio
async def test_qr_code_adapter_rejects_empty():
    """Empty code is an encoding error."""
    with pytest.raises(EncodingError):
        await QRCodeAdapter().encode("")


@pytest.mark.asyncio
async def test_qr_code_adapter_wraps_library_errors():
    """Library failures surface as EncodingError."""
    adapter = QRCodeAdapter()

    with patch.object(adapter, "render", side_effect=ValueError("bad")):
        with pytest.raises(EncodingError, match="bad"):
            await adapter.encode("T2020000PPPP")


def test_stdout_adapter_filters_by_level(capsys):
    """Entries below the threshold are dropped."""
    logger = StdoutAdapter(level="info")

    logger.log("debug", "hidden")
    logger.log("error", "shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "ERROR: shown" in out

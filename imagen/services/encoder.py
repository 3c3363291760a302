"""Serialise rendered images to PNG or JPEG bytes using Pillow."""
from __future__ import annotations

import io

from PIL import Image

from imagen.errors import UnsupportedFormatError

JPEG_QUALITY = 90

_PILLOW_FORMATS = {
    "png": "PNG",
    "jpeg": "JPEG",
    "jpg": "JPEG",
}


def pillow_format(fmt: str) -> str:
    """Map a user-facing format token to Pillow's format name."""
    try:
        return _PILLOW_FORMATS[fmt.strip().lower()]
    except KeyError:
        raise UnsupportedFormatError(fmt) from None


def content_type(fmt: str | None) -> str:
    """Response mime type; anything that is not jpeg/jpg is served as PNG."""
    if fmt and fmt.strip().lower() in ("jpeg", "jpg"):
        return "image/jpeg"
    return "image/png"


def encode(image: Image.Image, fmt: str) -> bytes:
    target = pillow_format(fmt)
    buffer = io.BytesIO()
    if target == "JPEG":
        # JPEG has no alpha channel
        image.convert("RGB").save(buffer, format="JPEG", quality=JPEG_QUALITY)
    else:
        image.save(buffer, format="PNG")
    return buffer.getvalue()

"""Font lookup with graceful fallback to Pillow's built-in face."""
from __future__ import annotations

import logging
import sys
from typing import Iterable

from PIL import ImageFont

logger = logging.getLogger(__name__)

_SYSTEM_FONTS = {
    "darwin": [
        "/System/Library/Fonts/Helvetica.ttc",
        "/System/Library/Fonts/SFNSText.ttf",
        "/System/Library/Fonts/SFNS.ttf",
        "/Library/Fonts/Arial.ttf",
        "/System/Library/Fonts/Supplemental/Arial.ttf",
    ],
    "linux": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
        "/usr/share/fonts/TTF/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
    ],
    "win32": [
        "C:\\Windows\\Fonts\\arial.ttf",
        "C:\\Windows\\Fonts\\calibri.ttf",
    ],
}

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def system_font_paths(platform: str | None = None) -> list[str]:
    platform = platform or sys.platform
    for prefix, paths in _SYSTEM_FONTS.items():
        if platform.startswith(prefix):
            return list(paths)
    return []


def load_font(size: float, extra_paths: Iterable[str] = ()) -> Font:
    """Return the first loadable TrueType face, else Pillow's default font.

    Never raises: unreadable or unparsable files are skipped.
    """

    for path in [*extra_paths, *system_font_paths()]:
        try:
            # index 0 picks the first face of a .ttc collection
            return ImageFont.truetype(path, size=size, index=0)
        except (OSError, ValueError) as exc:
            logger.debug("Font %s not usable: %s", path, exc)
    logger.debug("No TrueType font found, using built-in default font")
    return ImageFont.load_default(size=size)

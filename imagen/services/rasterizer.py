"""Render an ImageConfig to a Pillow image.

Stages run strictly in order: background (always), border (width > 0),
text (non-empty text). Deferred ``random`` colours are drawn once at the
start of each render.
"""
from __future__ import annotations

import itertools
import logging
import math
import random
from typing import Callable, Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from imagen.config import get_settings
from imagen.models import RGBA, BackgroundSpec, ImageConfig, TextSpec

from .colors import interpolate, invert
from .fonts import load_font

logger = logging.getLogger(__name__)
settings = get_settings()

WHITE = RGBA(255, 255, 255, 255)

# the eight 1px neighbours of the anchor, used for the outline halo
OUTLINE_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def render(
    config: ImageConfig,
    rng: random.Random | None = None,
    *,
    font_paths: Sequence[str] | None = None,
) -> Image.Image:
    """Composite background, border and text into a new RGBA image."""

    rng = rng or random.Random()
    config = config.resolve(rng)
    if font_paths is None:
        font_paths = [settings.font_path] if settings.font_path else []

    image = Image.new("RGBA", (config.width, config.height))
    render_background(image, config.background, rng)
    if config.border.width > 0:
        draw_border(image, config.border.width, config.border.color.resolve(rng))
    if config.text.text:
        draw_text(image, config.text, font_paths)
    return image


# ------------------------------------------------------------------
# Background
# ------------------------------------------------------------------

def render_background(image: Image.Image, background: BackgroundSpec, rng: random.Random) -> None:
    renderer = _BACKGROUND_RENDERERS[background.mode]
    renderer(image, background, rng)


def fill_solid(image: Image.Image, color: RGBA) -> None:
    image.paste(tuple(color), (0, 0, image.width, image.height))


def fill_tiled(image: Image.Image, palette: Sequence[RGBA], tile_size: int) -> None:
    """Colour tiles round-robin by their row-major index."""
    counter = itertools.count()
    _fill_grid(image, tile_size, lambda: palette[next(counter) % len(palette)])


def fill_noise(image: Image.Image, palette: Sequence[RGBA], tile_size: int, rng: random.Random) -> None:
    """Colour every tile with an independent pick from *palette*."""
    _fill_grid(image, tile_size, lambda: rng.choice(palette))


def _fill_grid(image: Image.Image, tile_size: int, pick: Callable[[], RGBA]) -> None:
    draw = ImageDraw.Draw(image)
    width, height = image.size
    for y in range(0, height, tile_size):
        for x in range(0, width, tile_size):
            # edge tiles are clipped to the canvas
            box = [x, y, min(x + tile_size, width) - 1, min(y + tile_size, height) - 1]
            draw.rectangle(box, fill=tuple(pick()))


def fill_gradient(image: Image.Image, stops: Sequence[RGBA], angle: float) -> None:
    """Linear gradient; 0 degrees runs top to bottom, 90 left to right."""

    width, height = image.size
    rad = math.radians(angle)
    dx, dy = math.sin(rad), math.cos(rad)

    corners = [(0, 0), (width, 0), (0, height), (width, height)]
    projections = [cx * dx + cy * dy for cx, cy in corners]
    lowest, highest = min(projections), max(projections)

    ys, xs = np.mgrid[0:height, 0:width]
    t = (xs * dx + ys * dy - lowest) / (highest - lowest)
    image.paste(Image.fromarray(gradient_colors(stops, t)))


def gradient_colors(stops: Sequence[RGBA], t: np.ndarray) -> np.ndarray:
    """Sample a multi-stop gradient at positions ``t`` in [0, 1].

    Returns a uint8 array of shape ``t.shape + (4,)``. With N stops, ``t``
    is split into N-1 equal segments; ``t == 1`` clamps to the last stop.
    """

    palette = np.asarray(stops, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    count = len(palette)

    if count == 2:
        blended = interpolate(stops[0], stops[1], t)
    else:
        segment = t * (count - 1)
        index = np.floor(segment).astype(np.intp)
        local = segment - index
        past_end = index >= count - 1
        index = np.where(past_end, count - 2, index)
        local = np.where(past_end, 1.0, local)
        blended = interpolate(palette[index], palette[index + 1], local)
    return np.clip(blended, 0, 255).astype(np.uint8)


def sample_gradient(stops: Sequence[RGBA], t: float) -> RGBA:
    return RGBA(*gradient_colors(stops, np.asarray(t)).tolist())


def _colors(background, rng: random.Random) -> list[RGBA]:
    return [spec.resolve(rng) for spec in background.colors]


_BACKGROUND_RENDERERS = {
    "solid": lambda image, bg, rng: fill_solid(image, bg.color.resolve(rng)),
    "tiled": lambda image, bg, rng: fill_tiled(image, _colors(bg, rng), bg.tile_size),
    "noise": lambda image, bg, rng: fill_noise(image, _colors(bg, rng), bg.tile_size, rng),
    "gradient": lambda image, bg, rng: fill_gradient(image, _colors(bg, rng), bg.angle),
}


# ------------------------------------------------------------------
# Border
# ------------------------------------------------------------------

def draw_border(image: Image.Image, width: int, color: RGBA) -> None:
    """Paint ``width`` 1px rings; top/bottom and left/right passes overlap at corners."""

    draw = ImageDraw.Draw(image)
    w, h = image.size
    fill = tuple(color)
    for i in range(min(width, h)):
        draw.rectangle([0, i, w - 1, i], fill=fill)
        draw.rectangle([0, h - 1 - i, w - 1, h - 1 - i], fill=fill)
    for i in range(min(width, w)):
        draw.rectangle([i, 0, i, h - 1], fill=fill)
        draw.rectangle([w - 1 - i, 0, w - 1 - i, h - 1], fill=fill)


# ------------------------------------------------------------------
# Text
# ------------------------------------------------------------------

def outline_color(color: RGBA) -> RGBA:
    return invert(color)


def text_anchor(width: int, height: int, text_width: int, text_height: int) -> tuple[int, int]:
    """Baseline-left point that centres a run of the given extent."""
    # truncates toward zero; x goes negative when the run is wider than the canvas
    return int((width - text_width) / 2), int((height + text_height) / 2)


def draw_text(image: Image.Image, spec: TextSpec, font_paths: Sequence[str] = ()) -> None:
    text = spec.render_text(image.width, image.height)
    if not text:
        return
    if spec.angle:
        logger.debug("Text angle %.1f is not applied; drawing unrotated", spec.angle)

    color = spec.color.resolve() if spec.color is not None else WHITE
    halo = outline_color(color)
    font = load_font(spec.size, font_paths)
    draw = ImageDraw.Draw(image)

    # bitmap fonts and multiline runs do not support anchors; they are placed by their top-left corner
    anchor = "ls" if isinstance(font, ImageFont.FreeTypeFont) and "\n" not in text else None
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font, anchor=anchor)
    text_width, text_height = right - left, bottom - top
    x, y = text_anchor(image.width, image.height, text_width, text_height)
    if anchor is None:
        y -= text_height

    for dx, dy in OUTLINE_OFFSETS:
        draw.text((x + dx, y + dy), text, font=font, fill=tuple(halo), anchor=anchor)
    draw.text((x, y), text, font=font, fill=tuple(color), anchor=anchor)

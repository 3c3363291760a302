"""Path-segment grammar used by the image server.

    /[WxH]/<p>:<value>/<p>:<value>/...

    c:color[:t:textcolor]                    solid background
    g:c1,c2[,...][:angle][:t:textcolor]      gradient background
    t:c1,c2[,...][:tilesize][:t:textcolor]   tiled background
    t:"text"[,s:size][,c:color][,a:angle]    overlay text (value starts with ")
    n:c1,c2[,...][:tilesize][:t:textcolor]   noise background
    f:png|jpeg                               output format
    b:width[,color]                          border

Every c/g/t/n segment adds a background candidate; one of them is picked
uniformly at random for the request.
"""
from __future__ import annotations

import logging
import random

from imagen.errors import InvalidSegmentError
from imagen.models import URL_TILE_SIZE, BorderSpec, ColorSpec, ImageConfig, TextSpec
from imagen.services.colors import parse_color_spec

from .common import (
    BackgroundDefinition,
    build_background,
    parse_number,
    parse_size,
    split_respecting_quotes,
    split_text_override,
)

logger = logging.getLogger(__name__)

_BACKGROUND_PREFIXES = {
    "c": "solid",
    "g": "gradient",
    "t": "tiled",
    "n": "noise",
}


def parse_url(path: str, rng: random.Random | None = None) -> ImageConfig:
    """Turn a request path into an ImageConfig.

    Raises one of the ImagenError subclasses on the first malformed segment;
    nothing partial is ever returned.
    """

    rng = rng or random.Random()
    path = path.removeprefix("/")
    if not path:
        return ImageConfig()

    fields: dict = {}
    text = TextSpec()
    candidates: list[BackgroundDefinition] = []

    for index, part in enumerate(path.split("/")):
        if not part:
            continue

        if index == 0 and ":" not in part:
            fields["width"], fields["height"] = parse_size(part)
            continue

        if len(part) < 2 or part[1] != ":":
            raise InvalidSegmentError(part, "invalid parameter format")
        prefix, value = part[0], part[2:]

        if prefix == "t" and value.startswith('"'):
            text = parse_text(value, text)
        elif prefix in _BACKGROUND_PREFIXES:
            candidates.append(parse_background_segment(_BACKGROUND_PREFIXES[prefix], value))
        elif prefix == "f":
            fields["format"] = value.strip().lower()
        elif prefix == "b":
            fields["border"] = parse_border(value)
        else:
            raise InvalidSegmentError(part, f"unknown parameter prefix {prefix!r}")

    if candidates:
        chosen = rng.choice(candidates)
        logger.debug("Picked %s background out of %d candidates", chosen.mode, len(candidates))
        fields["background"] = chosen.background
        if chosen.text_color is not None:
            text = text.model_copy(update={"color": chosen.text_color})

    return ImageConfig(text=text, **fields)


def parse_background_segment(mode: str, value: str) -> BackgroundDefinition:
    body, override = split_text_override(value)
    text_color: ColorSpec | None = None
    if override is not None:
        text_color = parse_color_spec(override)
    return BackgroundDefinition(
        background=build_background(mode, body, tile_size=URL_TILE_SIZE),
        text_color=text_color,
    )


def parse_text(value: str, base: TextSpec | None = None) -> TextSpec:
    """Parse ``"text"[,s:size][,c:color][,a:angle]`` on top of *base*.

    Options missing from *value* keep the values *base* already has.
    """

    parts = split_respecting_quotes(value)
    if not parts:
        raise InvalidSegmentError(value, "empty text config")

    options: dict = {"text": parts[0].strip('"')}
    for part in parts[1:]:
        part = part.strip()
        if not part:
            continue
        if len(part) < 2 or part[1] != ":":
            raise InvalidSegmentError(part, "invalid text parameter")

        key, val = part[0], part[2:]
        if key == "s":
            size = parse_number(val, float, "text size")
            if not size > 0:
                raise InvalidSegmentError(val, "text size must be positive")
            options["size"] = size
        elif key == "c":
            options["color"] = parse_color_spec(val)
        elif key == "a":
            options["angle"] = parse_number(val, float, "text angle")
        else:
            raise InvalidSegmentError(part, f"unknown text parameter {key!r}")
    return (base or TextSpec()).model_copy(update=options)


def parse_border(value: str) -> BorderSpec:
    """Parse ``width[,color]``; the colour defaults to black."""

    parts = value.split(",")
    if len(parts) > 2:
        raise InvalidSegmentError(value, "border must be width[,color]")
    width = parse_number(parts[0], int, "border width")
    if width < 0:
        raise InvalidSegmentError(parts[0], "border width must not be negative")
    if len(parts) == 2:
        return BorderSpec(width=width, color=parse_color_spec(parts[1]))
    return BorderSpec(width=width)

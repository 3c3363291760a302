"""Sub-grammars shared by the batch flags and the URL path segments."""
from __future__ import annotations

import math
import random
import re
from typing import Callable, TypeVar

from pydantic import BaseModel, ConfigDict

from imagen.errors import InsufficientColorsError, InvalidSegmentError, InvalidSizeError
from imagen.models import (
    BackgroundSpec,
    ColorSpec,
    GradientBackground,
    NoiseBackground,
    SolidBackground,
    TiledBackground,
)
from imagen.models.color import pin_color
from imagen.services.colors import parse_color_spec

T = TypeVar("T")

TEXT_COLOR_MARKER = ":t:"

# ASCII digits only; int() and float() would also take "1_0" or non-Latin digits
_DIGITS = re.compile(r"[0-9]+")
_NUMBER_PATTERNS = {
    int: re.compile(r"[+-]?[0-9]+"),
    float: re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"),
}


def parse_size(token: str) -> tuple[int, int]:
    """Parse ``WxH`` into a (width, height) pair of positive ints."""

    parts = token.strip().split("x")
    if len(parts) != 2:
        raise InvalidSizeError(token)
    if not all(_DIGITS.fullmatch(part) for part in parts):
        raise InvalidSizeError(token, "width and height must be integers")
    width, height = int(parts[0]), int(parts[1])
    if width <= 0 or height <= 0:
        raise InvalidSizeError(token, "width and height must be positive")
    return width, height


def parse_color_list(value: str, mode: str, *, minimum: int = 2) -> tuple[ColorSpec, ...]:
    tokens = value.split(",")
    if len(tokens) < minimum:
        raise InsufficientColorsError(mode, len(tokens), minimum)
    return tuple(parse_color_spec(tok.strip()) for tok in tokens)


def parse_number(value: str, convert: Callable[[str], T], what: str) -> T:
    """Convert a numeric field, reporting failures as InvalidSegmentError."""
    text = value.strip()
    pattern = _NUMBER_PATTERNS.get(convert)
    if pattern is not None and not pattern.fullmatch(text):
        raise InvalidSegmentError(value, f"invalid {what}")
    try:
        number = convert(text)
    except ValueError:
        raise InvalidSegmentError(value, f"invalid {what}") from None
    if isinstance(number, float) and not math.isfinite(number):
        raise InvalidSegmentError(value, f"invalid {what}")
    return number


def split_text_override(value: str, *, use_last: bool = False) -> tuple[str, str | None]:
    """Split ``background[:t:color]`` into the background part and the colour token.

    With *use_last* the final marker wins and anything before it stays in
    the background part; otherwise a second marker is an error.
    """

    if use_last:
        head, sep, tail = value.rpartition(TEXT_COLOR_MARKER)
        return (head, tail) if sep else (value, None)
    parts = value.split(TEXT_COLOR_MARKER)
    if len(parts) > 2:
        raise InvalidSegmentError(value, "more than one text colour override")
    return (parts[0], parts[1]) if len(parts) == 2 else (value, None)


def split_respecting_quotes(value: str, sep: str = ",") -> list[str]:
    """Split on *sep* except inside double quotes.

    Quotes are kept in the output, there is no escape character and empty
    parts are dropped.
    """

    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in value:
        if ch == '"':
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == sep and not in_quotes:
            if current:
                parts.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        parts.append("".join(current))
    return parts


class BackgroundDefinition(BaseModel):
    """One background candidate plus its optional text-colour override."""

    model_config = ConfigDict(frozen=True)

    background: BackgroundSpec
    text_color: ColorSpec | None = None

    @property
    def mode(self) -> str:
        return self.background.mode

    def has_deferred(self) -> bool:
        return self.background.has_deferred() or bool(self.text_color and self.text_color.is_deferred)

    def resolve(self, rng: random.Random | None = None) -> "BackgroundDefinition":
        return BackgroundDefinition(
            background=self.background.resolve(rng),
            text_color=pin_color(self.text_color, rng) if self.text_color is not None else None,
        )


def build_background(mode: str, value: str, *, tile_size: int) -> BackgroundSpec:
    """Build a background from ``color`` (solid) or ``c1,c2[,...][:extra]``.

    ``extra`` is the gradient angle or the tile edge length depending on
    *mode*; *tile_size* is used when no edge length is given.
    """

    if mode == "solid":
        return SolidBackground(color=parse_color_spec(value.strip()))

    fields = value.split(":")
    if len(fields) > 2:
        raise InvalidSegmentError(value, f"invalid {mode} format")
    colors = parse_color_list(fields[0], mode)
    extra = fields[1] if len(fields) == 2 else None

    if mode == "gradient":
        angle = parse_number(extra, float, "gradient angle") if extra is not None else 0.0
        return GradientBackground(colors=colors, angle=angle)

    if extra is not None:
        tile_size = parse_number(extra, int, "tile size")
        if tile_size <= 0:
            raise InvalidSegmentError(extra, "tile size must be positive")
    if mode == "tiled":
        return TiledBackground(colors=colors, tile_size=tile_size)
    if mode == "noise":
        return NoiseBackground(colors=colors, tile_size=tile_size)
    raise InvalidSegmentError(mode, "unknown background mode")

"""Colour token resolution and channel arithmetic.

Supported tokens (case-insensitive, surrounding whitespace ignored):

    random      a fresh uniform draw per call, alpha 255
    RRGGBB      hex, optionally prefixed with ``#``
    <name>      one of the W3C/HTML colour names

Randomness always comes from a ``random.Random`` instance so callers (and
tests) can supply a seeded source.
"""
from __future__ import annotations

import random
import string

import numpy as np

from imagen.errors import InvalidColorError
from imagen.models.color import RGBA, ColorSpec, DeferredColor, ResolvedColor

from .color_names import NAMED_COLORS

RANDOM_TOKEN = "random"

_HEX_DIGITS = frozenset(string.hexdigits)
_default_rng = random.Random()


def new_rng(seed: int | None = None) -> random.Random:
    """Return an independent random source, seeded when *seed* is given."""
    return random.Random(seed)


def normalize_token(token: str) -> str:
    return token.strip().lower().removeprefix("#")


def is_random_token(token: str) -> bool:
    return normalize_token(token) == RANDOM_TOKEN


def resolve(token: str, rng: random.Random | None = None) -> RGBA:
    """Map a colour token to an RGBA value or raise InvalidColorError."""

    value = normalize_token(token)
    if value == RANDOM_TOKEN:
        rng = rng or _default_rng
        return RGBA(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255), 255)

    if len(value) == 6 and all(ch in _HEX_DIGITS for ch in value):
        return RGBA(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), 255)

    try:
        return NAMED_COLORS[value]
    except KeyError:
        raise InvalidColorError(token.strip()) from None


def parse_color_spec(token: str) -> ColorSpec:
    """Validate *token* now; keep ``random`` deferred until render time."""

    if is_random_token(token):
        return DeferredColor()
    return ResolvedColor(rgba=resolve(token))


def interpolate(c1, c2, t):
    """Blend two colours channel by channel (alpha included), truncating toward zero.

    Scalar inputs give an RGBA. The colours may also be arrays with the
    channels on the last axis and *t* an array of positions; the result is
    then a float array of shape ``t.shape + (4,)`` holding whole numbers.
    """

    start = np.asarray(c1, dtype=np.float64)
    end = np.asarray(c2, dtype=np.float64)
    weight = np.asarray(t, dtype=np.float64)
    if weight.ndim:
        weight = weight[..., np.newaxis]
    blended = np.trunc(start + weight * (end - start))
    if blended.ndim == 1:
        return RGBA(*(int(channel) for channel in blended))
    return blended


def invert(c: RGBA) -> RGBA:
    """Photographic negative of the RGB channels; alpha is kept."""
    return RGBA(255 - c.r, 255 - c.g, 255 - c.b, c.a)

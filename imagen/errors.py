"""Exceptions raised while parsing, rendering or encoding an image.

All of them are deterministic input-validation failures; callers surface
them rather than retrying.
"""
from __future__ import annotations


class ImagenError(Exception):
    """Base class for every imagen failure."""


class InvalidColorError(ImagenError):
    """Raised when a colour token is neither a known name, hex code nor ``random``."""

    def __init__(self, token: str):
        super().__init__(f"invalid color: {token}")
        self.token = token


class InvalidSizeError(ImagenError):
    """Raised for size tokens that are not ``WxH`` with positive integers."""

    def __init__(self, token: str, reason: str = "size must be in format WxH"):
        super().__init__(f"invalid size {token!r}: {reason}")
        self.token = token
        self.reason = reason


class InvalidSegmentError(ImagenError):
    """Raised for a malformed mini-language segment or an unknown prefix."""

    def __init__(self, segment: str, reason: str):
        super().__init__(f"{reason}: {segment}")
        self.segment = segment
        self.reason = reason


class InsufficientColorsError(ImagenError):
    def __init__(self, mode: str, count: int, minimum: int = 2):
        super().__init__(f"{mode} requires at least {minimum} colors, got {count}")
        self.mode = mode
        self.count = count
        self.minimum = minimum


class UnsupportedFormatError(ImagenError):
    def __init__(self, fmt: str):
        super().__init__(f"unsupported format: {fmt}")
        self.format = fmt

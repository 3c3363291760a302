from .background import (
    BATCH_TILE_SIZE,
    URL_TILE_SIZE,
    BackgroundSpec,
    GradientBackground,
    NoiseBackground,
    SolidBackground,
    TiledBackground,
)
from .color import RGBA, ColorSpec, DeferredColor, ResolvedColor, fixed_color
from .image_config import BorderSpec, ImageConfig, TextSpec

__all__ = [
    "BATCH_TILE_SIZE",
    "URL_TILE_SIZE",
    "BackgroundSpec",
    "GradientBackground",
    "NoiseBackground",
    "SolidBackground",
    "TiledBackground",
    "RGBA",
    "ColorSpec",
    "DeferredColor",
    "ResolvedColor",
    "fixed_color",
    "BorderSpec",
    "ImageConfig",
    "TextSpec",
]

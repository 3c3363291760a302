from __future__ import annotations

import random
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .color import ColorSpec, pin_color

URL_TILE_SIZE = 36
BATCH_TILE_SIZE = 16


class _Background(BaseModel):
    model_config = ConfigDict(frozen=True)

    def has_deferred(self) -> bool:
        return any(c.is_deferred for c in self.color_specs())

    def color_specs(self) -> tuple[ColorSpec, ...]:  # pragma: no cover
        raise NotImplementedError


class SolidBackground(_Background):
    mode: Literal["solid"] = "solid"
    color: ColorSpec

    def color_specs(self) -> tuple[ColorSpec, ...]:
        return (self.color,)

    def resolve(self, rng: random.Random | None = None) -> "SolidBackground":
        return self.model_copy(update={"color": pin_color(self.color, rng)})


class _Palette(_Background):
    colors: tuple[ColorSpec, ...] = Field(..., min_length=2)

    def color_specs(self) -> tuple[ColorSpec, ...]:
        return self.colors

    def resolve(self, rng: random.Random | None = None):
        """Return a copy whose colours are all concrete values."""
        return self.model_copy(update={"colors": tuple(pin_color(c, rng) for c in self.colors)})


class TiledBackground(_Palette):
    mode: Literal["tiled"] = "tiled"
    tile_size: int = Field(URL_TILE_SIZE, gt=0)


class NoiseBackground(_Palette):
    mode: Literal["noise"] = "noise"
    tile_size: int = Field(URL_TILE_SIZE, gt=0)


class GradientBackground(_Palette):
    mode: Literal["gradient"] = "gradient"
    angle: float = 0.0


BackgroundSpec = Annotated[
    Union[SolidBackground, TiledBackground, NoiseBackground, GradientBackground],
    Field(discriminator="mode"),
]

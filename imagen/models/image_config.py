from __future__ import annotations

import random

from pydantic import BaseModel, ConfigDict, Field

from .background import BackgroundSpec, SolidBackground
from .color import RGBA, ColorSpec, fixed_color, pin_color

DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 192
DEFAULT_BACKGROUND = RGBA(128, 128, 128)
DEFAULT_TEXT = "{w}x{h}"
DEFAULT_TEXT_SIZE = 20.0


class BorderSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(0, ge=0)
    color: ColorSpec = Field(default_factory=lambda: fixed_color((0, 0, 0)))


class TextSpec(BaseModel):
    """Overlay text; ``color`` of None means automatic (white)."""

    model_config = ConfigDict(frozen=True)

    text: str = DEFAULT_TEXT
    size: float = Field(DEFAULT_TEXT_SIZE, gt=0)
    color: ColorSpec | None = None
    angle: float = 0.0

    def render_text(self, width: int, height: int) -> str:
        return self.text.replace("{w}", str(width)).replace("{h}", str(height))


class ImageConfig(BaseModel):
    """Everything needed to render a single image."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(DEFAULT_WIDTH, ge=1)
    height: int = Field(DEFAULT_HEIGHT, ge=1)
    background: BackgroundSpec = Field(
        default_factory=lambda: SolidBackground(color=fixed_color(DEFAULT_BACKGROUND))
    )
    border: BorderSpec = Field(default_factory=BorderSpec)
    text: TextSpec = Field(default_factory=TextSpec)
    format: str = "png"

    def resolve(self, rng: random.Random | None = None) -> "ImageConfig":
        """Return a copy with every deferred ``random`` colour drawn once."""

        text = self.text
        if text.color is not None and text.color.is_deferred:
            text = text.model_copy(update={"color": pin_color(text.color, rng)})
        return self.model_copy(
            update={
                "background": self.background.resolve(rng),
                "border": self.border.model_copy(update={"color": pin_color(self.border.color, rng)}),
                "text": text,
            }
        )

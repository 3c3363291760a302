"""Flag-style grammar used by ``imagen generate``.

Each background flag value looks like::

    color1[,color2,...][:extra][:t:textcolor]

where ``extra`` is a gradient angle or a tile size. A request expands to
rounds x sizes x background definitions images.
"""
from __future__ import annotations

import logging
import os
import random
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from imagen.errors import InvalidSegmentError
from imagen.models import (
    BATCH_TILE_SIZE,
    BorderSpec,
    ColorSpec,
    ImageConfig,
    SolidBackground,
    TextSpec,
    fixed_color,
)
from imagen.models.color import pin_color
from imagen.models.image_config import DEFAULT_BACKGROUND, DEFAULT_TEXT, DEFAULT_TEXT_SIZE
from imagen.services.colors import parse_color_spec
from imagen.services.encoder import pillow_format

from .common import BackgroundDefinition, build_background, parse_number, parse_size, split_text_override

logger = logging.getLogger(__name__)

DEFAULT_SIZE = "256x192"
DEFAULT_FILENAME = "image.png"


def parse_background(param: str, mode: str) -> BackgroundDefinition:
    """Parse one background flag value for *mode* (solid/gradient/tiled/noise)."""

    param, override = split_text_override(param, use_last=True)
    text_color: ColorSpec | None = None
    if override is not None:
        text_color = parse_color_spec(override)

    return BackgroundDefinition(
        background=build_background(mode, param, tile_size=BATCH_TILE_SIZE),
        text_color=text_color,
    )


def parse_border(value: str) -> BorderSpec:
    """Parse the ``width,color`` border option."""

    parts = value.split(",")
    if len(parts) != 2:
        raise InvalidSegmentError(value, "border must be in format width,color")
    width = parse_number(parts[0], int, "border width")
    if width < 0:
        raise InvalidSegmentError(parts[0], "border width must not be negative")
    return BorderSpec(width=width, color=parse_color_spec(parts[1]))


def _default_backgrounds() -> list[BackgroundDefinition]:
    return [BackgroundDefinition(background=SolidBackground(color=fixed_color(DEFAULT_BACKGROUND)))]


class BatchRequest(BaseModel):
    """All options of one ``generate`` invocation."""

    model_config = ConfigDict(frozen=True)

    sizes: list[str] = Field(default_factory=lambda: [DEFAULT_SIZE], min_length=1)
    backgrounds: list[BackgroundDefinition] = Field(default_factory=_default_backgrounds, min_length=1)
    border: BorderSpec = Field(default_factory=BorderSpec)
    text: str = DEFAULT_TEXT
    text_size: float = Field(DEFAULT_TEXT_SIZE, gt=0)
    text_color: ColorSpec | None = None
    text_angle: float = 0.0
    filename: str = DEFAULT_FILENAME
    format: str = "png"
    rounds: int = Field(1, ge=1)


class BatchJob(BaseModel):
    number: int
    filename: str
    mode: str
    config: ImageConfig


def job_filename(template: str, number: int, total: int, width: int, height: int) -> str:
    """Apply ``-NNNN`` numbering (only when total > 1), then the placeholders."""

    name = template
    if total > 1:
        root, ext = os.path.splitext(name)
        name = f"{root}-{number:04d}{ext}"
    return name.replace("{w}", str(width)).replace("{h}", str(height)).replace("{nr}", str(number))


def plan_batch(request: BatchRequest, rng: random.Random | None = None) -> Iterator[BatchJob]:
    """Validate *request* and return an iterator over its jobs.

    Sizes and format are checked before the first job is produced. Jobs are
    built lazily so the caller can write each file before the next one is
    planned.
    """

    sizes = [parse_size(token) for token in request.sizes]
    pillow_format(request.format)
    return _iter_jobs(request, sizes, rng or random.Random())


def _iter_jobs(request: BatchRequest, sizes: list[tuple[int, int]], rng: random.Random) -> Iterator[BatchJob]:
    total = len(sizes) * len(request.backgrounds) * request.rounds
    resolved: list[BackgroundDefinition | None] = [None] * len(request.backgrounds)
    number = 0

    for round_nr in range(1, request.rounds + 1):
        # random tokens get a fresh draw every round; fixed ones are reused
        for i, definition in enumerate(request.backgrounds):
            if resolved[i] is None or definition.has_deferred():
                resolved[i] = definition.resolve(rng)
        border = request.border.model_copy(update={"color": pin_color(request.border.color, rng)})
        default_text_color = pin_color(request.text_color, rng) if request.text_color is not None else None
        logger.debug("Planning round %d of %d", round_nr, request.rounds)

        for width, height in sizes:
            for definition in resolved:
                number += 1
                text_color = definition.text_color if definition.text_color is not None else default_text_color
                config = ImageConfig(
                    width=width,
                    height=height,
                    background=definition.background,
                    border=border,
                    text=TextSpec(
                        text=request.text.replace("{nr}", str(number)),
                        size=request.text_size,
                        color=text_color,
                        angle=request.text_angle,
                    ),
                    format=request.format,
                )
                yield BatchJob(
                    number=number,
                    filename=job_filename(request.filename, number, total, width, height),
                    mode=definition.mode,
                    config=config,
                )

from __future__ import annotations

import random
from typing import Annotated, Literal, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


class ResolvedColor(BaseModel):
    """A colour whose value is fixed at parse time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resolved"] = "resolved"
    rgba: RGBA

    @property
    def is_deferred(self) -> bool:
        return False

    def resolve(self, rng: random.Random | None = None) -> RGBA:  # noqa: ARG002
        return self.rgba


class DeferredColor(BaseModel):
    """A ``random`` token, drawn anew each time it is resolved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["deferred"] = "deferred"
    token: Literal["random"] = "random"

    @property
    def is_deferred(self) -> bool:
        return True

    def resolve(self, rng: random.Random | None = None) -> RGBA:
        from imagen.services.colors import resolve  # local import to avoid cycles

        return resolve(self.token, rng)


ColorSpec = Annotated[Union[ResolvedColor, DeferredColor], Field(discriminator="kind")]


def fixed_color(rgba: RGBA | tuple[int, ...]) -> ResolvedColor:
    """Shortcut for building a ResolvedColor from a plain tuple."""
    return ResolvedColor(rgba=RGBA(*rgba))


def pin_color(spec, rng: random.Random | None = None):
    """Replace a deferred spec with a ResolvedColor holding a fresh draw."""
    if not spec.is_deferred:
        return spec
    return ResolvedColor(rgba=spec.resolve(rng))

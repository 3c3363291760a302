"""Shared fixtures for the imagen test-suite."""
from __future__ import annotations

import random

import pytest

from imagen.models import RGBA

RED = RGBA(255, 0, 0, 255)
GREEN = RGBA(0, 128, 0, 255)
BLUE = RGBA(0, 0, 255, 255)
WHITE = RGBA(255, 255, 255, 255)


@pytest.fixture
def rng():
    """Seeded random source so sampled outcomes are reproducible."""
    return random.Random(1234)

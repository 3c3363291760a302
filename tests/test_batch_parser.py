from __future__ import annotations

import pytest

from imagen.errors import (
    InsufficientColorsError,
    InvalidColorError,
    InvalidSegmentError,
    InvalidSizeError,
    UnsupportedFormatError,
)
from imagen.models import RGBA, DeferredColor, GradientBackground, TiledBackground
from imagen.parsing import BatchRequest, parse_background, parse_border, plan_batch
from imagen.parsing.batch import job_filename

from .conftest import BLUE, RED, WHITE


class TestBackgroundFlags:
    def test_gradient_with_angle_and_text_color(self) -> None:
        definition = parse_background("red,blue:45:t:white", "gradient")
        assert isinstance(definition.background, GradientBackground)
        assert definition.background.angle == 45.0
        assert [c.resolve() for c in definition.background.colors] == [RED, BLUE]
        assert definition.text_color.resolve() == WHITE

    def test_only_last_text_marker_is_split_off(self) -> None:
        # the earlier marker stays in the colour token
        with pytest.raises(InvalidColorError, match="red:t:green"):
            parse_background("red:t:green:t:white", "solid")

    def test_tiled_defaults_to_batch_tile_size(self) -> None:
        definition = parse_background("red,blue", "tiled")
        assert isinstance(definition.background, TiledBackground)
        assert definition.background.tile_size == 16

    def test_tile_size_suffix(self) -> None:
        assert parse_background("red,blue,green:10", "noise").background.tile_size == 10

    def test_solid_random_is_deferred(self) -> None:
        definition = parse_background("random", "solid")
        assert isinstance(definition.background.color, DeferredColor)
        assert definition.has_deferred()

    def test_fixed_definition_has_nothing_deferred(self) -> None:
        assert not parse_background("red,blue:5:t:black", "tiled").has_deferred()

    @pytest.mark.parametrize(
        "param, mode, error",
        [
            ("red", "noise", InsufficientColorsError),
            ("red", "gradient", InsufficientColorsError),
            ("red,blue:x", "gradient", InvalidSegmentError),
            ("red,blue:1:2", "tiled", InvalidSegmentError),
            ("red,blurple", "tiled", InvalidColorError),
            ("red:t:nope", "solid", InvalidColorError),
            ("red,blue:1_6", "tiled", InvalidSegmentError),
        ],
    )
    def test_rejected(self, param: str, mode: str, error: type) -> None:
        with pytest.raises(error):
            parse_background(param, mode)


class TestBorderFlag:
    def test_width_and_color(self) -> None:
        border = parse_border("5,red")
        assert border.width == 5
        assert border.color.resolve() == RED

    @pytest.mark.parametrize("value", ["5", "five,red", "-1,red", "1,red,blue", "1_0,red"])
    def test_rejected(self, value: str) -> None:
        with pytest.raises(InvalidSegmentError):
            parse_border(value)


class TestFilenames:
    def test_single_image_is_not_numbered(self) -> None:
        assert job_filename("out-{w}x{h}-{nr}.png", 1, 1, 400, 300) == "out-400x300-1.png"

    def test_numbering_before_extension(self) -> None:
        assert job_filename("shots/image.png", 12, 20, 10, 10) == "shots/image-0012.png"

    def test_numbering_without_extension(self) -> None:
        assert job_filename("image", 3, 4, 10, 10) == "image-0003"


class TestPlanning:
    def test_cartesian_product_order(self, rng) -> None:
        request = BatchRequest(
            sizes=["40x30", "20x10"],
            backgrounds=[parse_background("red", "solid"), parse_background("red,blue", "gradient")],
        )
        jobs = list(plan_batch(request, rng))
        assert [j.filename for j in jobs] == [f"image-{n:04d}.png" for n in range(1, 5)]
        assert [(j.config.width, j.mode) for j in jobs] == [
            (40, "solid"),
            (40, "gradient"),
            (20, "solid"),
            (20, "gradient"),
        ]

    def test_random_redrawn_per_round_fixed_kept(self, rng) -> None:
        request = BatchRequest(
            sizes=["10x10"],
            backgrounds=[parse_background("random", "solid"), parse_background("blue", "solid")],
            rounds=2,
        )
        first_random, first_fixed, second_random, second_fixed = [
            job.config.background.color for job in plan_batch(request, rng)
        ]
        assert not first_random.is_deferred
        assert first_random.resolve() != second_random.resolve()
        assert first_fixed.resolve() == second_fixed.resolve() == BLUE

    def test_random_shared_across_sizes_within_round(self, rng) -> None:
        request = BatchRequest(sizes=["10x10", "20x20"], backgrounds=[parse_background("random,blue", "tiled")])
        a, b = [job.config.background.colors[0].resolve() for job in plan_batch(request, rng)]
        assert a == b

    def test_text_color_priority(self, rng) -> None:
        request = BatchRequest(
            backgrounds=[parse_background("red:t:blue", "solid"), parse_background("green", "solid")],
            text_color=parse_background("white", "solid").background.color,
        )
        override, fallback = [job.config.text.color.resolve() for job in plan_batch(request, rng)]
        assert override == BLUE
        assert fallback == WHITE

    def test_auto_text_color_is_none(self, rng) -> None:
        job = next(plan_batch(BatchRequest(), rng))
        assert job.config.text.color is None
        assert job.filename == "image.png"
        assert job.config.background.color.resolve() == RGBA(128, 128, 128)

    def test_nr_placeholder_in_text(self, rng) -> None:
        request = BatchRequest(text="#{nr} {w}x{h}", rounds=3)
        texts = [job.config.text.text for job in plan_batch(request, rng)]
        assert texts == ["#1 {w}x{h}", "#2 {w}x{h}", "#3 {w}x{h}"]

    def test_malformed_size_fails_before_any_job(self, rng) -> None:
        request = BatchRequest(sizes=["400x300", "400"])
        with pytest.raises(InvalidSizeError):
            plan_batch(request, rng)

    def test_unsupported_format_fails_early(self, rng) -> None:
        with pytest.raises(UnsupportedFormatError):
            plan_batch(BatchRequest(format="webp"), rng)

"""Unit tests for colour maths, mood blending and the text palette."""

from __future__ import annotations

import pytest

from artistwall.models.personality import HSLColor, Mood
from artistwall.services.color_blender import ColorBlender, derive_palette
from artistwall.utils.color import (
    contrast_ratio,
    find_min_lightness_for_contrast,
    hsl_to_rgb,
    relative_luminance,
    round_half_up,
)


class _ConstantRandom:
    """Returns the same value on every draw and counts the draws."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def __call__(self) -> float:
        self.draws += 1
        return self.value


def _contrast(a: HSLColor, b: HSLColor) -> float:
    return contrast_ratio(
        relative_luminance(*hsl_to_rgb(a.hue, a.saturation, a.lightness)),
        relative_luminance(*hsl_to_rgb(b.hue, b.saturation, b.lightness)),
    )


# ======================================================================
# utils.color
# ======================================================================


class TestColorMaths:
    @pytest.mark.parametrize(
        ("hsl", "rgb"),
        [
            ((0, 100, 50), (255, 0, 0)),
            ((120, 100, 50), (0, 255, 0)),
            ((240, 100, 50), (0, 0, 255)),
            ((0, 0, 100), (255, 255, 255)),
            ((0, 0, 0), (0, 0, 0)),
        ],
    )
    def test_hsl_to_rgb(self, hsl: tuple[int, int, int], rgb: tuple[int, int, int]) -> None:
        assert hsl_to_rgb(*hsl) == rgb

    def test_black_on_white_is_max_contrast(self) -> None:
        assert contrast_ratio(relative_luminance(255, 255, 255), relative_luminance(0, 0, 0)) == pytest.approx(21.0)

    def test_contrast_is_symmetric(self) -> None:
        assert contrast_ratio(0.2, 0.8) == contrast_ratio(0.8, 0.2)

    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-0.5) == 0
        assert round_half_up(2.49) == 2

    def test_min_lightness_meets_target(self) -> None:
        lightness = find_min_lightness_for_contrast(200, 60, 20, 30, 7.0)
        text = HSLColor(hue=200, saturation=30, lightness=lightness)
        assert _contrast(text, HSLColor(hue=200, saturation=60, lightness=20)) >= 7.0
        assert 50 <= lightness <= 100


# ======================================================================
# ColorBlender
# ======================================================================


class TestColorBlender:
    def test_single_mood_without_jitter_hits_range_centre(self) -> None:
        color = ColorBlender().blend(_ConstantRandom(0.5), {Mood.HAPPY: 1.0})
        assert color == HSLColor(hue=75, saturation=73, lightness=27)

    def test_wrapping_range_centre(self) -> None:
        color = ColorBlender().blend(_ConstantRandom(0.5), {Mood.ANGRY: 1.0})
        assert color.hue == 5

    def test_hues_average_around_the_circle(self) -> None:
        # Angry (5) and energetic (310) meet near 337, not at the arithmetic 157.
        color = ColorBlender().blend(_ConstantRandom(0.5), {Mood.ANGRY: 0.5, Mood.ENERGETIC: 0.5})
        assert 330 <= color.hue <= 345

    def test_always_draws_three_values(self) -> None:
        blender = ColorBlender()
        for weights in ({}, {Mood.SAD: 1.0}, {Mood.SAD: 0.3, Mood.DARK: 0.7}):
            rng = _ConstantRandom(0.25)
            blender.blend(rng, weights)
            assert rng.draws == 3

    def test_no_moods_gives_full_spectrum_colour(self) -> None:
        color = ColorBlender().blend(_ConstantRandom(0.5), {})
        assert color == HSLColor(hue=180, saturation=73, lightness=26)

    def test_zero_confidence_is_fully_muted(self) -> None:
        color = ColorBlender().blend(_ConstantRandom(0.5), {Mood.HAPPY: 1.0}, confidence=0.0)
        assert color.saturation == 30

    def test_half_confidence_is_half_way(self) -> None:
        color = ColorBlender().blend(_ConstantRandom(0.5), {Mood.HAPPY: 1.0}, confidence=0.5)
        assert color.saturation == 52

    def test_full_confidence_is_not_dampened(self) -> None:
        blender = ColorBlender()
        assert blender.blend(_ConstantRandom(0.5), {Mood.HAPPY: 1.0}, confidence=1.0) == blender.blend(
            _ConstantRandom(0.5), {Mood.HAPPY: 1.0}
        )

    @pytest.mark.parametrize(("draw", "expected"), [(0.99, 35), (0.0, 12)])
    def test_lightness_is_clamped(self, draw: float, expected: int) -> None:
        blender = ColorBlender({"lightness_jitter": 200})
        assert blender.blend(_ConstantRandom(draw), {Mood.HAPPY: 1.0}).lightness == expected

    def test_unknown_config_keys_are_ignored(self) -> None:
        blender = ColorBlender({"hue_jitter": 0, "not_a_key": 5})
        assert blender.blend(_ConstantRandom(0.9), {Mood.HAPPY: 1.0}).hue == 75

    def test_random_color_for_mood_uses_its_range(self) -> None:
        color = ColorBlender().random_color(_ConstantRandom(0.5), Mood.SAD)
        assert color.hue == 230

    def test_random_color_without_mood(self) -> None:
        rng = _ConstantRandom(0.0)
        assert ColorBlender().random_color(rng) == HSLColor(hue=0, saturation=55, lightness=20)
        assert rng.draws == 3


# ======================================================================
# derive_palette
# ======================================================================


class TestDerivePalette:
    @pytest.mark.parametrize(
        "background",
        [
            HSLColor(hue=230, saturation=40, lightness=18),
            HSLColor(hue=280, saturation=70, lightness=22),
            HSLColor(hue=5, saturation=60, lightness=20),
            HSLColor(hue=140, saturation=20, lightness=12),
        ],
    )
    def test_tiers_meet_contrast_targets_and_floors(self, background: HSLColor) -> None:
        palette = derive_palette(background)

        assert _contrast(palette.primary, background) >= 7.0
        assert _contrast(palette.secondary, background) >= 4.5
        assert _contrast(palette.tertiary, background) >= 4.5
        assert _contrast(palette.muted, background) >= 3.0
        assert palette.primary.lightness >= 90
        assert palette.secondary.lightness >= 80
        assert palette.tertiary.lightness >= 70
        assert palette.muted.lightness >= 60

    def test_text_keeps_background_hue(self) -> None:
        palette = derive_palette(HSLColor(hue=300, saturation=50, lightness=20))
        assert {palette.primary.hue, palette.muted.hue} == {300}

    @pytest.mark.parametrize(("saturation", "expected"), [(20, 25), (73, 29), (95, 35)])
    def test_text_saturation_is_bounded(self, saturation: int, expected: int) -> None:
        palette = derive_palette(HSLColor(hue=10, saturation=saturation, lightness=20))
        assert palette.primary.saturation == expected

    def test_glow(self) -> None:
        assert derive_palette(HSLColor(hue=75, saturation=73, lightness=27)).glow == "hsla(75, 73%, 60%, 0.6)"
        assert derive_palette(HSLColor(hue=10, saturation=40, lightness=12)).glow == "hsla(10, 40%, 57%, 0.6)"

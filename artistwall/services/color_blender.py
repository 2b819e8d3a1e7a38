"""Mood-weighted background colours and the text palette derived from them.

# ─── HOW A BACKGROUND COLOUR IS BLENDED ─────────────────────────────────
#
#   1. Every mood with weight contributes its range's centre hue to a
#      circular (sin/cos) mean, so red 350 + blue 220 lands on purple
#      instead of green.
#   2. Saturation and lightness are plain weighted means of the range
#      midpoints.
#   3. Three seeded draws jitter hue, saturation and lightness a little
#      (default ±15°, ±7.5 %, ±3 %).
#   4. While data is still arriving, saturation is pulled towards a muted
#      30 % by a smoothstep of the confidence, so the colour "settles".
#   5. Saturation is clamped to 20-95 % and lightness to 12-35 %, which
#      keeps white overlay text readable.
#
# With no mood at all the colour is drawn from the full spectrum.
# ────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping

from artistwall.config.vocabulary import MOOD_COLOR_RANGES
from artistwall.models.personality import HSLColor, Mood
from artistwall.models.theme import TextPalette
from artistwall.utils.color import find_min_lightness_for_contrast, round_half_up

Random = Callable[[], float]

_DEFAULTS: dict[str, float] = {
    "hue_jitter": 30.0,
    "saturation_jitter": 15.0,
    "lightness_jitter": 6.0,
    "muted_saturation": 30.0,
    "saturation_min": 20.0,
    "saturation_max": 95.0,
    "lightness_min": 12.0,
    "lightness_max": 35.0,
}

# (contrast target, lightness floor) per text tier
_TEXT_TIERS: dict[str, tuple[float, int]] = {
    "primary": (7.0, 90),
    "secondary": (4.5, 80),
    "tertiary": (4.5, 70),
    "muted": (3.0, 60),
}


def _smoothstep(x: float) -> float:
    return x * x * (3 - 2 * x)


class ColorBlender:
    """Turns mood weights into an :class:`HSLColor`.

    Parameters
    ----------
    config:
        Optional ``colour`` section of the YAML config; any key of
        ``_DEFAULTS`` may be overridden.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        merged = dict(_DEFAULTS)
        for key, value in (config or {}).items():
            if key in merged and value is not None:
                merged[key] = float(value)
        self._cfg = merged

    def blend(
        self,
        rng: Random,
        mood_weights: Mapping[Mood, float] | None,
        confidence: float | None = None,
    ) -> HSLColor:
        """Blend *mood_weights* into a background colour.

        Three values are always drawn from *rng*, so callers sharing a
        stream stay in step whatever the weights.  ``confidence`` below 1
        dampens saturation; ``None`` means no dampening.
        """
        r1, r2, r3 = rng(), rng(), rng()
        entries = [(mood, w) for mood, w in (mood_weights or {}).items() if mood in MOOD_COLOR_RANGES]
        total = sum(w for _, w in entries)

        if entries and total > 0:
            sin_sum = cos_sum = sat_sum = light_sum = 0.0
            for mood, weight in entries:
                color_range = MOOD_COLOR_RANGES[mood]
                share = weight / total
                rad = math.radians(color_range.center_hue)
                sin_sum += math.sin(rad) * share
                cos_sum += math.cos(rad) * share
                sat_sum += color_range.mid_saturation * share
                light_sum += color_range.mid_lightness * share

            mean_hue = (math.degrees(math.atan2(sin_sum, cos_sum)) + 360) % 360
            hue = round_half_up(mean_hue + (r1 - 0.5) * self._cfg["hue_jitter"])
            if hue < 0:
                hue += 360
            if hue >= 360:
                hue -= 360
            saturation = round_half_up(sat_sum + (r2 - 0.5) * self._cfg["saturation_jitter"])
            lightness = round_half_up(light_sum + (r3 - 0.5) * self._cfg["lightness_jitter"])
        else:
            hue, saturation, lightness = self._full_spectrum(r1, r2, r3)

        if confidence is not None and confidence < 1:
            eased = _smoothstep(max(confidence, 0.0))
            muted = self._cfg["muted_saturation"]
            saturation = round_half_up(muted + (saturation - muted) * eased)

        saturation = int(max(self._cfg["saturation_min"], min(self._cfg["saturation_max"], saturation)))
        lightness = int(max(self._cfg["lightness_min"], min(self._cfg["lightness_max"], lightness)))
        return HSLColor(hue=hue, saturation=saturation, lightness=lightness)

    def random_color(self, rng: Random, mood: Mood | None = None) -> HSLColor:
        """A single-mood colour, or a full-spectrum one when *mood* is None."""
        if mood is not None and mood in MOOD_COLOR_RANGES:
            return self.blend(rng, {mood: 1.0})
        hue, saturation, lightness = self._full_spectrum(rng(), rng(), rng())
        return HSLColor(hue=hue, saturation=saturation, lightness=lightness)

    @staticmethod
    def _full_spectrum(r1: float, r2: float, r3: float) -> tuple[int, int, int]:
        return (
            round_half_up(r1 * 359),
            round_half_up(r2 * 35 + 55),
            round_half_up(r3 * 12 + 20),
        )


def derive_palette(background: HSLColor) -> TextPalette:
    """Tinted text colours meeting WCAG contrast targets against *background*."""
    h, s, light = background.hue, background.saturation, background.lightness
    text_s = min(max(s * 0.4, 25), 35)

    tiers: dict[str, HSLColor] = {}
    for name, (target, floor) in _TEXT_TIERS.items():
        lightness = max(find_min_lightness_for_contrast(h, s, light, text_s, target), floor)
        tiers[name] = HSLColor(hue=h, saturation=round_half_up(text_s), lightness=lightness)

    glow = f"hsla({h}, {s}%, {min(light + 45, 60)}%, 0.6)"
    return TextPalette(glow=glow, **tiers)

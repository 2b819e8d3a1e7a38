"""Colour maths: HSL conversion and WCAG contrast helpers."""

from __future__ import annotations

import math


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """Convert HSL (degrees, percent, percent) to 0-255 RGB."""
    s = saturation / 100
    lum = lightness / 100
    c = (1 - abs(2 * lum - 1)) * s
    x = c * (1 - abs(((hue / 60) % 2) - 1))
    m = lum - c / 2

    if hue < 60:
        r, g, b = c, x, 0.0
    elif hue < 120:
        r, g, b = x, c, 0.0
    elif hue < 180:
        r, g, b = 0.0, c, x
    elif hue < 240:
        r, g, b = 0.0, x, c
    elif hue < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
    )


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG 2.1 relative luminance of an sRGB colour (0-1)."""

    def _linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """Contrast ratio between two luminances (1-21)."""
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def find_min_lightness_for_contrast(
    bg_hue: float,
    bg_saturation: float,
    bg_lightness: float,
    text_saturation: float,
    target_ratio: float,
) -> int:
    """Binary-search the lowest text lightness (50-100) meeting *target_ratio*.

    Text keeps the background hue so it reads as tinted rather than grey.
    """
    bg_lum = relative_luminance(*hsl_to_rgb(bg_hue, bg_saturation, bg_lightness))

    low, high = 50.0, 100.0
    while high - low > 1:
        mid = (low + high) / 2
        text_lum = relative_luminance(*hsl_to_rgb(bg_hue, text_saturation, mid))
        if contrast_ratio(text_lum, bg_lum) >= target_ratio:
            high = mid
        else:
            low = mid
    return math.ceil(high)


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity rather than to even."""
    return math.floor(value + 0.5)

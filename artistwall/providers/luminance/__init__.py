"""Luminance analyzer implementations."""

from artistwall.providers.luminance.pillow_luminance_analyzer import (
    PillowLuminanceAnalyzer,
    overlay_luminance,
)

__all__ = ["PillowLuminanceAnalyzer", "overlay_luminance"]

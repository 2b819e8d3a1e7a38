"""Wall theme: background colour, derived text palette and headline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from artistwall.models.personality import HSLColor


class TextPalette(BaseModel):
    """Text colours tinted with the background hue.

    Each tier meets a WCAG contrast target against the background:
    primary 7:1, secondary and tertiary 4.5:1, muted 3:1.
    """

    model_config = ConfigDict(frozen=True)

    primary: HSLColor
    secondary: HSLColor
    tertiary: HSLColor
    muted: HSLColor
    glow: str  # hsla() string, a brighter translucent version of the background


class WallTheme(BaseModel):
    """The single colour + headline output of a load.

    ``final`` is False for progressive updates and True for the conclusive
    theme computed once every personality sample has resolved.
    """

    model_config = ConfigDict(frozen=True)

    background: HSLColor
    palette: TextPalette
    headline: str | None = None
    confidence: float = 1.0
    final: bool = False

"""Pillow-backed luminance analyzer for tile overlays.

The artist name overlay sits in the bottom-right of each tile.  When the
image under it is light, white text needs a dark backdrop.  This
analyzer downloads the image, squashes it to 50x50, and averages a
simplified (non gamma-corrected) relative luminance over the region
from 30 % across and 60 % down to the corner.  Above 0.5 is "light".

Any download or decode failure counts as dark.
"""

from __future__ import annotations

import asyncio
import io

import httpx
from PIL import Image, UnidentifiedImageError

from artistwall.interfaces.luminance_analyzer import ILuminanceAnalyzer
from artistwall.utils.logging import get_logger

SAMPLE_SIZE = 50
REGION_START_X = 0.3
REGION_START_Y = 0.6
LIGHT_THRESHOLD = 0.5


def overlay_luminance(image: Image.Image) -> float:
    """Average simplified luminance (0-1) of the overlay region of *image*."""
    sample = image.convert("RGB").resize((SAMPLE_SIZE, SAMPLE_SIZE))
    start_x = int(SAMPLE_SIZE * REGION_START_X)
    start_y = int(SAMPLE_SIZE * REGION_START_Y)
    region = sample.crop((start_x, start_y, SAMPLE_SIZE, SAMPLE_SIZE))

    pixels = list(region.getdata())
    total = 0.0
    for r, g, b in pixels:
        total += 0.2126 * r / 255 + 0.7152 * g / 255 + 0.0722 * b / 255
    return total / len(pixels)


def _classify(data: bytes) -> bool:
    with Image.open(io.BytesIO(data)) as image:
        return overlay_luminance(image) > LIGHT_THRESHOLD


class PillowLuminanceAnalyzer(ILuminanceAnalyzer):
    """Classifies tile images as light or dark from their pixels."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client
        self._logger = get_logger(__name__)

    async def is_light(self, image_url: str) -> bool:
        try:
            response = await self._http.get(image_url)
            response.raise_for_status()
            # Decoding is CPU-bound; keep it off the event loop.
            is_light = await asyncio.to_thread(_classify, response.content)
        except (httpx.HTTPError, UnidentifiedImageError, OSError, ValueError) as exc:
            self._logger.debug("luminance_analysis_failed", url=image_url, error=str(exc))
            return False

        self._logger.debug("luminance_analyzed", url=image_url, light=is_light)
        return is_light

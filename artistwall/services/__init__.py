"""Domain services for the artist wall.

    - lookup_cache: process-lifetime memo of every per-artist lookup
    - metadata_resolver: artist name → MBID + Discogs id, with identity checks
    - image_source_pipeline: per-source chains, first-hit resolution, prefetch
    - personality_service: mood/genre aggregation and per-artist sampling
    - color_blender: mood-weighted background colour and text palette
    - headline_service: headline with a guaranteed fallback
"""

from artistwall.services.color_blender import ColorBlender, derive_palette
from artistwall.services.headline_service import FALLBACK_HEADLINE, HeadlineService
from artistwall.services.image_source_pipeline import ImageSourcePipeline, SourceBatch
from artistwall.services.lookup_cache import MISSING, LookupCaches
from artistwall.services.metadata_resolver import MetadataResolver
from artistwall.services.personality_service import (
    PersonalityCollector,
    aggregate_personality,
    blend_weights,
)

__all__ = [
    "ColorBlender",
    "FALLBACK_HEADLINE",
    "HeadlineService",
    "ImageSourcePipeline",
    "LookupCaches",
    "MISSING",
    "MetadataResolver",
    "PersonalityCollector",
    "SourceBatch",
    "aggregate_personality",
    "blend_weights",
    "derive_palette",
]

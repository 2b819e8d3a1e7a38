"""Configuration module: exports Settings and load_config."""

from artistwall.config.loader import load_config
from artistwall.config.settings import Settings

__all__ = ["Settings", "load_config"]

"""Builds the resolved configuration mapping.

``config/config.yaml`` holds the tuning tables (rate-limit tiers, colour
jitter, reveal cadence).  Values that :class:`Settings` owns (read from the
environment or ``.env``) are laid over the YAML, so a deploy can change
the artist limit or source order without editing the file.  Keys with no
environment equivalent always come from YAML.
"""

from pathlib import Path

import yaml

from artistwall.config.settings import Settings
from artistwall.utils.errors import ConfigurationError


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Return the YAML config at *path* overlaid with *settings*.

    A missing file yields the settings overlay alone.

    Raises:
        ConfigurationError: The file is not valid YAML or is not a mapping.
    """
    resolved = _read_yaml(Path(path))
    _deep_merge(resolved, _settings_overlay(settings or Settings()))
    return resolved


def _read_yaml(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(message=f"Invalid YAML in {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(message=f"{config_path} must contain a mapping at the top level")
    return data


def _settings_overlay(settings: Settings) -> dict:
    return {
        "app": {"env": settings.app_env, "http_timeout": settings.http_timeout},
        "wall": {
            "artist_limit": settings.artist_limit,
            "period": settings.period,
            "tile_size": settings.tile_size,
            "image_sources": list(settings.image_sources),
        },
        "rotation": {
            "interval": settings.rotation_interval,
            "start_delay": settings.rotation_start_delay,
            "prefers_reduced_motion": settings.prefers_reduced_motion,
        },
        "services": {"configured": settings.get_configured_credentials()},
        "logging": {"level": settings.log_level},
    }


def _deep_merge(base: dict, overrides: dict) -> None:
    """Merge *overrides* into *base* in place, recursing into nested dicts."""
    for key, value in overrides.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _deep_merge(current, value)
        else:
            base[key] = value

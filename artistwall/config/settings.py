"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ─────────────────────────────────────────────────
#
# Values are read from TWO sources (in priority order):
#
#   1. **Environment variables**: e.g., LASTFM_API_KEY=abc123
#   2. **.env file**: key=value lines in the project root .env file
#
# Field name `discogs_key` maps to env var `DISCOGS_KEY` automatically.
# List fields (`image_sources`) are given as JSON in the environment:
#   IMAGE_SOURCES='["DISCOGS", "ITUNES", "THE_AUDIO_DB"]'
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """artistwall settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Credentials ===
    # Empty string = "not configured"; the matching provider reports
    # is_available() == False and every lookup through it resolves to None.
    lastfm_api_key: str = ""
    discogs_key: str = ""
    discogs_secret: str = ""

    # === Upstream base URLs ===
    lastfm_base_url: str = "https://ws.audioscrobbler.com/2.0/"
    musicbrainz_base_url: str = "https://musicbrainz.org/ws/2"
    discogs_base_url: str = "https://api.discogs.com"
    audiodb_base_url: str = "https://www.theaudiodb.com/api/v1/json/2"
    itunes_base_url: str = "https://itunes.apple.com"
    musicbrainz_user_agent: str = "artistwall/0.1.0 ( https://github.com/artistwall/artistwall )"

    # === Headline service ===
    # Leave empty to use the built-in template generator.
    headline_service_url: str = ""

    # === Wall ===
    default_username: str = ""
    artist_limit: int = 12
    period: str = "1month"
    tile_size: int = 250
    image_sources: list[str] = ["ITUNES", "DISCOGS", "THE_AUDIO_DB"]

    # === Rotation ===
    rotation_interval: float = 2.5
    rotation_start_delay: float = 2.0
    prefers_reduced_motion: bool = False

    # === App Config ===
    http_timeout: float = 10.0
    app_env: str = "development"
    log_level: str = "INFO"

    def get_configured_credentials(self) -> list[str]:
        """Return the names of upstream services whose credentials are set."""
        configured: list[str] = []
        if self.lastfm_api_key:
            configured.append("lastfm")
        if self.discogs_key and self.discogs_secret:
            configured.append("discogs")
        if self.headline_service_url:
            configured.append("headline")
        return configured

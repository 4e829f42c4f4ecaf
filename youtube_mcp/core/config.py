"""Configuration settings for the YouTube MCP server."""

import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("youtube_mcp.config")


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config.yaml."""

    model_config = SettingsConfigDict(  # type: ignore[assignment]
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Allow extra env vars not defined in model
    )

    # YouTube Data API
    youtube_api_key: str | None = None
    youtube_api_timeout: int = 30
    youtube_api_max_retries: int = 3

    # Server / transport
    transport_mode: Literal["stdio", "http"] = "http"
    http_host: str = "0.0.0.0"
    http_port: int = 8080
    log_level: str = "INFO"

    # yt-dlp
    ytdlp_binary: str = "yt-dlp"
    ytdlp_timeout_seconds: float | None = None  # None waits for the child indefinitely

    @property
    def has_api_key(self) -> bool:
        """Whether a non-blank API key is configured."""
        return bool(self.youtube_api_key and self.youtube_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Searched in order when no explicit path is given
CONFIG_FILE_CANDIDATES = (Path("config.yaml"), Path("config.yml"))

# (yaml section, yaml key) -> (settings field, converter)
YAML_FIELD_MAP: dict[tuple[str, str], tuple[str, Callable[[Any], Any]]] = {
    ("server", "transport"): ("transport_mode", str),
    ("server", "host"): ("http_host", str),
    ("server", "port"): ("http_port", int),
    ("server", "log_level"): ("log_level", lambda v: str(v).upper()),
    ("youtube_api", "timeout"): ("youtube_api_timeout", int),
    ("youtube_api", "max_retries"): ("youtube_api_max_retries", int),
    ("ytdlp", "binary"): ("ytdlp_binary", str),
    ("ytdlp", "timeout_seconds"): ("ytdlp_timeout_seconds", float),
}


def load_yaml_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """
    Read config.yaml.

    Args:
        config_path: Explicit file; otherwise ./config.yaml then ./config.yml

    Returns:
        Parsed mapping, or {} if there is no readable file
    """
    if config_path is None:
        config_path = next((p for p in CONFIG_FILE_CANDIDATES if p.is_file()), None)
        if config_path is None:
            return {}

    path = Path(config_path)
    if not path.is_file():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", path)
        return {}
    return data


def apply_yaml_config(settings: Settings, config: dict[str, Any]) -> Settings:
    """
    Overlay YAML values onto ``settings`` in place.

    A field set from the environment keeps its value: YAML only fills fields
    that still hold their declared default. ``null`` values are skipped.

    Returns:
        The same Settings object
    """
    fields = Settings.model_fields

    for (section, key), (field, convert) in YAML_FIELD_MAP.items():
        values = config.get(section)
        if not isinstance(values, dict) or values.get(key) is None:
            continue
        if getattr(settings, field) != fields[field].default:
            continue
        setattr(settings, field, convert(values[key]))

    return settings


def get_settings_with_yaml(config_path: Path | str | None = None) -> Settings:
    """
    Cached settings with config.yaml applied.

    Priority: environment (and .env) > config.yaml > defaults.
    """
    return apply_yaml_config(get_settings(), load_yaml_config(config_path))

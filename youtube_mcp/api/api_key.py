"""YouTube Data API key handling."""

import os
from collections.abc import Mapping
from typing import Any

from youtube_mcp.core.constants import API_KEY_ENV_VAR
from youtube_mcp.core.exceptions import ValidationError


def validate_api_key(value: Any) -> str:
    """
    Validate an API key.

    Args:
        value: Candidate key (from a header, env var or settings)

    Returns:
        The key with surrounding whitespace removed

    Raises:
        ValidationError: If the key is missing or blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("API key is required", field="api_key")
    return value.strip()


def get_api_key_from_env(env: Mapping[str, str] | None = None) -> str:
    """Read and validate ``YOUTUBE_API_KEY`` from the environment."""
    if env is None:
        env = os.environ
    return validate_api_key(env.get(API_KEY_ENV_VAR))

"""
Centralized configuration management for the NGO nearby-places search.

All configuration is loaded from environment variables with sensible defaults.
Settings are built explicitly with `load_settings()` and handed to the
clients that need them; nothing reads the environment at call time.

Usage:
    from ngo_nearby.core.config import load_settings

    settings = load_settings()
    print(settings.SEARCH_LIMIT)
    provider = settings.provider_config()
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from ngo_nearby.core.exceptions import ConfigurationError
from ngo_nearby.models import PlaceCategory

# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # repository root
    Path.cwd() / ".env",  # Current working directory
]

MAPBOX_GEOCODING_URL = "https://api.mapbox.com/geocoding/v5/mapbox.places"
DEFAULT_CATEGORIES = "restaurants=restaurant,religious=temple"


def parse_categories(value: str) -> List[PlaceCategory]:
    """
    Parse a category specification into PlaceCategory objects.

    Accepts comma-separated `key=query` pairs. A bare `key` searches the
    provider for the key itself.

    Args:
        value: Category specification, e.g. "restaurants=restaurant,religious=temple"

    Returns:
        List of PlaceCategory in declaration order

    Raises:
        ConfigurationError: If a key is empty or repeated

    Example:
        >>> parse_categories("restaurants=restaurant,cafe")
        [PlaceCategory(key='restaurants', query='restaurant'), PlaceCategory(key='cafe', query='cafe')]
    """
    categories = []
    seen = set()

    for chunk in value.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue

        key, _, query = chunk.partition("=")
        key = key.strip()
        query = query.strip() or key

        if not key:
            raise ConfigurationError(f"Invalid category entry: '{chunk}'")
        if key in seen:
            raise ConfigurationError(f"Duplicate category key: '{key}'")

        seen.add(key)
        categories.append(PlaceCategory(key=key, query=query))

    return categories


@dataclass(frozen=True)
class ProviderConfig:
    """Connection details for the geocoding/search provider."""

    access_token: str
    base_url: str = MAPBOX_GEOCODING_URL
    timeout: float = 30.0


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Mapbox Provider
    # ==========================================================================
    MAPBOX_ACCESS_TOKEN: str = field(
        default_factory=lambda: os.getenv("MAPBOX_ACCESS_TOKEN", "")
    )
    MAPBOX_BASE_URL: str = field(
        default_factory=lambda: os.getenv("MAPBOX_BASE_URL", MAPBOX_GEOCODING_URL)
    )
    REQUEST_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "30"))
    )

    # ==========================================================================
    # Search Settings
    # ==========================================================================
    SEARCH_MARGIN: float = field(
        default_factory=lambda: float(os.getenv("SEARCH_MARGIN", "0.025"))
    )
    SEARCH_LIMIT: int = field(
        default_factory=lambda: int(os.getenv("SEARCH_LIMIT", "50"))
    )
    SEARCH_CATEGORIES: str = field(
        default_factory=lambda: os.getenv("SEARCH_CATEGORIES", DEFAULT_CATEGORIES)
    )

    # ==========================================================================
    # Concurrency
    # ==========================================================================
    MAX_CONCURRENCY: int = field(
        default_factory=lambda: int(os.getenv("MAX_CONCURRENCY", "1"))
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )

    @property
    def categories(self) -> List[PlaceCategory]:
        return parse_categories(self.SEARCH_CATEGORIES)

    def validate_mapbox(self) -> bool:
        """Check if the Mapbox access token is configured."""
        return bool(self.MAPBOX_ACCESS_TOKEN)

    def provider_config(self) -> ProviderConfig:
        """
        Build the provider configuration handed to the clients.

        Raises:
            ConfigurationError: If MAPBOX_ACCESS_TOKEN is not set
        """
        if not self.validate_mapbox():
            raise ConfigurationError("MAPBOX_ACCESS_TOKEN not configured")

        return ProviderConfig(
            access_token=self.MAPBOX_ACCESS_TOKEN,
            base_url=self.MAPBOX_BASE_URL.rstrip("/"),
            timeout=self.REQUEST_TIMEOUT,
        )


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load environment variables from a .env file and build Settings.

    Args:
        env_file: Explicit .env path. When omitted the first existing file
                  among the common locations is used.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a numeric setting cannot be parsed
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        for env_path in _env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                break

    try:
        return Settings()
    except ValueError as e:
        raise ConfigurationError(f"Invalid setting: {e}") from e

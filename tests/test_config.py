import pytest

from ngo_nearby.core.config import (
    DEFAULT_CATEGORIES,
    MAPBOX_GEOCODING_URL,
    Settings,
    load_settings,
    parse_categories,
)
from ngo_nearby.core.exceptions import ConfigurationError
from ngo_nearby.models import PlaceCategory


def test_parse_categories_pairs_and_bare_keys():
    assert parse_categories("restaurants=restaurant, cafe ,religious = temple") == [
        PlaceCategory(key="restaurants", query="restaurant"),
        PlaceCategory(key="cafe", query="cafe"),
        PlaceCategory(key="religious", query="temple"),
    ]


def test_parse_categories_ignores_empty_chunks():
    assert parse_categories(",,") == []


@pytest.mark.parametrize("value", ["=temple", "cafe,cafe=coffee"])
def test_parse_categories_rejects_bad_entries(value):
    with pytest.raises(ConfigurationError):
        parse_categories(value)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "pk.env")
    monkeypatch.setenv("SEARCH_LIMIT", "12")
    monkeypatch.setenv("SEARCH_MARGIN", "0.01")
    monkeypatch.setenv("MAX_CONCURRENCY", "3")
    monkeypatch.setenv("SEARCH_CATEGORIES", "parks=park")

    settings = Settings()

    assert settings.MAPBOX_ACCESS_TOKEN == "pk.env"
    assert settings.SEARCH_LIMIT == 12
    assert settings.SEARCH_MARGIN == 0.01
    assert settings.MAX_CONCURRENCY == 3
    assert settings.categories == [PlaceCategory(key="parks", query="park")]


def test_settings_defaults(monkeypatch):
    for name in ("MAPBOX_BASE_URL", "SEARCH_LIMIT", "SEARCH_MARGIN", "SEARCH_CATEGORIES", "MAX_CONCURRENCY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.MAPBOX_BASE_URL == MAPBOX_GEOCODING_URL
    assert settings.SEARCH_LIMIT == 50
    assert settings.SEARCH_MARGIN == 0.025
    assert settings.MAX_CONCURRENCY == 1
    assert settings.SEARCH_CATEGORIES == DEFAULT_CATEGORIES
    assert [c.key for c in settings.categories] == ["restaurants", "religious"]


def test_provider_config_requires_token():
    with pytest.raises(ConfigurationError):
        Settings(MAPBOX_ACCESS_TOKEN="").provider_config()


def test_provider_config_strips_trailing_slash():
    config = Settings(
        MAPBOX_ACCESS_TOKEN="pk.test",
        MAPBOX_BASE_URL="https://example.test/geocode/",
        REQUEST_TIMEOUT=7.5,
    ).provider_config()

    assert config.access_token == "pk.test"
    assert config.base_url == "https://example.test/geocode"
    assert config.timeout == 7.5


def test_load_settings_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "pk.placeholder")
    monkeypatch.delenv("MAPBOX_ACCESS_TOKEN")
    env_file = tmp_path / ".env"
    env_file.write_text("MAPBOX_ACCESS_TOKEN=pk.from-file\n")

    settings = load_settings(env_file)

    assert settings.MAPBOX_ACCESS_TOKEN == "pk.from-file"


def test_load_settings_rejects_malformed_numbers(monkeypatch):
    monkeypatch.setenv("SEARCH_LIMIT", "lots")

    with pytest.raises(ConfigurationError, match="Invalid setting"):
        load_settings()

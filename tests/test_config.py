"""Tests for environment-driven settings."""

from config import DEFAULT_ENDPOINT, Settings


def test_missing_key_is_reported():
    config = Settings(text_analytics_key="", text_analytics_endpoint=DEFAULT_ENDPOINT)
    assert config.validate() == ["TEXT_ANALYTICS_KEY"]
    assert not config.has_api_key()


def test_complete_configuration():
    config = Settings(text_analytics_key="abc", text_analytics_endpoint=DEFAULT_ENDPOINT)
    assert config.validate() == []
    assert config.has_api_key()


def test_empty_endpoint_is_reported():
    config = Settings(text_analytics_key="abc", text_analytics_endpoint="")
    assert config.validate() == ["TEXT_ANALYTICS_ENDPOINT"]


def test_default_endpoint_targets_v2():
    assert DEFAULT_ENDPOINT.endswith("/text/analytics/v2.0/")

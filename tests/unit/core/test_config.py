"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from stock_api.core.config.config import Settings
from stock_api.core.config.enums import Environment, LogLevel


def test_auth_follows_environment_by_default():
    assert Settings(ENVIRONMENT="development").auth_enabled is False
    assert Settings(ENVIRONMENT="production").auth_enabled is True
    assert Settings(ENVIRONMENT="production", AUTH_ENABLED=False).auth_enabled is False


def test_resolve_api_key():
    settings = Settings(API_KEYS={"key-abc": "store-9:user-7"})

    assert settings.resolve_api_key("key-abc") == ("store-9", "user-7")
    assert settings.resolve_api_key("unknown") is None


@pytest.mark.parametrize("value", ["store-only", ":user", "store:"])
def test_api_key_values_need_store_and_user(value):
    with pytest.raises(ValidationError):
        Settings(API_KEYS={"key": value})


def test_log_level_is_case_insensitive():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == LogLevel.DEBUG


def test_model_dump_safe_masks_api_keys():
    data = Settings(API_KEYS={"key-abc": "store-9:user-7"}).model_dump_safe()

    assert "key-abc" not in str(data)
    assert data["API_KEYS"] == {"key_0": "***masked***"}


def test_logging_config_mirrors_settings():
    settings = Settings(LOG_FORMAT="text", LOG_FILE_ENABLED=False, ENVIRONMENT=Environment.STAGING)

    config = settings.logging_config

    assert config.format.value == "text"
    assert config.file_enabled is False
    assert settings.is_development is False

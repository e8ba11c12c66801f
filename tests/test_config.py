import pytest
from pydantic import ValidationError

from app.config import Settings


def test_rest_settings_from_env(mock_env):
    settings = Settings(_env_file=None)

    assert settings.location_place_index_name == "test-index"
    assert settings.location_transport == "rest"
    assert settings.lookup_max_results == 5
    assert settings.connect_timeout == 10.0
    assert settings.read_timeout == 10.0
    assert settings.max_retries == 3
    assert settings.map_enabled is True


def test_blank_place_index_rejected(mock_env, monkeypatch):
    monkeypatch.setenv("LOCATION_PLACE_INDEX_NAME", "   ")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rest_requires_api_key(mock_env, monkeypatch):
    monkeypatch.setenv("LOCATION_API_KEY", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_sdk_requires_credentials(mock_env, monkeypatch):
    monkeypatch.setenv("LOCATION_TRANSPORT", "sdk")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_sdk_with_credentials(mock_env, monkeypatch):
    monkeypatch.setenv("LOCATION_TRANSPORT", "sdk")
    monkeypatch.setenv("LOCATION_API_KEY", "")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIATEST")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")

    settings = Settings(_env_file=None)

    assert settings.location_transport == "sdk"
    assert settings.map_enabled is False


def test_max_results_bounds(mock_env, monkeypatch):
    monkeypatch.setenv("LOOKUP_MAX_RESULTS", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)

import pytest

from app.core.config import Settings
from app.core.exceptions import ConfigurationError


def test_defaults():
    settings = Settings(MONGODB_URI="mongodb://db:27017", MONGODB_DB_NAME="rentals", _env_file=None)
    assert settings.API_V1_STR == "/api/v1"
    assert settings.SEED_ADMIN_EMAIL == "admin@carrentalplatform.com"
    settings.require_mongodb()


def test_blank_values_become_none():
    settings = Settings(MONGODB_URI="", MONGODB_DB_NAME=" ", _env_file=None)
    assert settings.MONGODB_URI is None
    assert settings.MONGODB_DB_NAME is None


def test_missing_uri_is_reported_first():
    settings = Settings(MONGODB_URI=None, MONGODB_DB_NAME=None, _env_file=None)
    with pytest.raises(ConfigurationError, match="MONGODB_URI"):
        settings.require_mongodb()


def test_missing_database_name():
    settings = Settings(MONGODB_URI="mongodb://db:27017", MONGODB_DB_NAME=None, _env_file=None)
    with pytest.raises(ConfigurationError, match="MONGODB_DB_NAME"):
        settings.require_mongodb()


def test_environment_is_read(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://env-host:27017")
    monkeypatch.setenv("MONGODB_DB_NAME", "from_env")
    monkeypatch.setenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "1500")
    settings = Settings(_env_file=None)
    assert settings.MONGODB_URI == "mongodb://env-host:27017"
    assert settings.MONGODB_DB_NAME == "from_env"
    assert settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS == 1500

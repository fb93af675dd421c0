import pytest

from blog_backend.config import DEV_JWT_SECRET, Settings
from blog_backend.errors import ConfigurationError
from blog_backend.main import create_app


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.JWT_EXPIRES_DAYS == 7


def test_production_without_secret_fails_fast(tmp_path):
    settings = Settings(APP_ENV="production", JWT_SECRET="", DB_FILE=str(tmp_path / "db.json"))
    with pytest.raises(ConfigurationError):
        create_app(settings)


def test_development_without_secret_uses_dev_default(tmp_path):
    settings = Settings(APP_ENV="development", JWT_SECRET="", DB_FILE=str(tmp_path / "db.json"))
    assert settings.resolve_jwt_secret() == DEV_JWT_SECRET


def test_configured_secret_wins():
    assert Settings(APP_ENV="production", JWT_SECRET="abc").resolve_jwt_secret() == "abc"


def test_cors_origins_are_split():
    assert Settings(CORS_ORIGINS="http://a, http://b").cors_origins == ["http://a", "http://b"]

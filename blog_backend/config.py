import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_backend.errors import ConfigurationError

DEV_JWT_SECRET = "supersecret_dev_key_change_me"
logger = logging.getLogger("blog.config")


class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    APP_ENV: str = "development"
    SERVICE_NAME: str = "minimal-blog-backend"
    CORS_ORIGINS: str = "*"

    # Auth
    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_DAYS: int = 7
    BCRYPT_ROUNDS: int = 10

    # Storage
    DB_FILE: str = "db.json"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.strip().lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        origins = [item.strip() for item in (self.CORS_ORIGINS or "").split(",") if item.strip()]
        return origins or ["*"]

    def resolve_jwt_secret(self) -> str:
        secret = (self.JWT_SECRET or "").strip()
        if secret:
            return secret
        if self.is_production:
            raise ConfigurationError("JWT_SECRET must be set when APP_ENV=production")
        logger.warning("JWT_SECRET not set, using the insecure development secret")
        return DEV_JWT_SECRET


def get_settings() -> Settings:
    return Settings()

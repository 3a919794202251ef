"""All settings, loaded from the environment or the .env file."""
from functools import lru_cache

from pydantic_settings import BaseSettings

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    # App
    app_env: str = "development"
    log_level: str = "INFO"

    # MongoDB
    mongo_url: str = "mongodb://localhost:27017"
    mongo_db_name: str = "signup"
    mongo_timeout_ms: int = 5000

    # Password hashing
    bcrypt_rounds: int = 12

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

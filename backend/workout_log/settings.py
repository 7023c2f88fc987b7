from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DB_PATH: str = "workouts.db"
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    ALLOW_ORIGINS: str = "*"
    API_VERSION: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        return f"sqlite+aiosqlite:///{self.DB_PATH}"

    @property
    def SYNC_DATABASE_URL(self) -> str:
        # alembic runs migrations on the blocking driver
        return f"sqlite:///{self.DB_PATH}"

@lru_cache
def get_settings() -> Settings:
    return Settings()

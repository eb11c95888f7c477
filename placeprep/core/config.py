"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "placeprep_user"
    postgres_password: str = "password"
    postgres_db: str = "placeprep_db"

    # MongoDB (notes + chat transcripts)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "placeprep_docs"

    # DeepSeek AI (OpenAI-compatible), optional - assistant is scripted without it
    deepseek_api_key: str = ""
    deepseek_base_url: str = "https://api.deepseek.com/v1"

    # JWT issued by the external auth provider
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_audience: Optional[str] = None

    # Leaderboard: cap on returned rows (ranking always covers everyone)
    leaderboard_limit: Optional[int] = None

    # App
    debug: bool = True

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def assistant_ai_enabled(self) -> bool:
        return bool(self.deepseek_api_key) and self.deepseek_api_key != "your_deepseek_api_key_here"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()

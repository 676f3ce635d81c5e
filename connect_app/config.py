from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    app_name: str = "Connect Activity Generator"

    # Simulated generation
    generation_delay: float = 1.5       # seconds, stands in for the AI call
    random_seed: Optional[int] = None   # fix the activity type draw

    # Rendering
    print_width: int = 72

    # App Settings
    debug: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # Cache Settings
    cache_size: int = Field(default=10, ge=0)
    cache_policies: List[str] = ["lru", "lfu"]  # Probe order on read

    # Store Settings
    store_name: str = "root"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CACHEFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


settings = Settings()

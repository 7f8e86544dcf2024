"""Configuration settings for TaskBoard."""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: List[str] = ["*"]

    # Store
    seed_tasks: bool = True  # Start with the two demo tasks

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    class Config:
        env_prefix = "TASKBOARD_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

"""
Configuration settings for the Tour Planner Backend.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Tour Planner Backend"
    app_version: str = "1.0.0"
    api_prefix: str = "/api"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Storage
    seed_fixtures: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()

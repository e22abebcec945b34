"""
Application configuration settings.

This file loads settings from environment variables.
For local development, create a .env file based on .env.example
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Attributes:
        DATABASE_URL: SQLAlchemy async connection string for the durable store
        APP_NAME: Name of the application
        DEBUG: Enable debug mode (echoes SQL when True)
    """
    
    # Durable store location
    # Format: sqlite+aiosqlite:///path/to/file.db
    DATABASE_URL: str = "sqlite+aiosqlite:///./talentflow.db"
    
    # Application settings
    APP_NAME: str = "TalentFlow Local Store"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Simulated network behaviour
    LATENCY_MIN_MS: int = 200
    LATENCY_MAX_MS: int = 1200
    MUTATION_FAILURE_RATE: float = 0.08
    REORDER_FAILURE_RATE: float = 0.10
    # One of: random, never, always
    FAILURE_POLICY: str = "random"

    # Seed data
    SEED_RANDOM_SEED: Optional[int] = None
    SEED_JOB_COUNT: int = 25
    SEED_CANDIDATE_COUNT: int = 1000
    SEED_ASSESSMENT_COUNT: int = 3

    # Pagination defaults
    DEFAULT_JOBS_PAGE_SIZE: int = 10
    DEFAULT_CANDIDATES_PAGE_SIZE: int = 25
    
    class Config:
        # Load variables from .env file if it exists
        env_file = ".env"
        env_file_encoding = "utf-8"


# Create a single settings instance to use throughout the app
settings = Settings()

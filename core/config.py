"""Application settings loaded from environment variables.

All configuration is read once at import time into a module-level
`settings` object so that database, logging and API modules share the same
values. Defaults are suitable for local development with SQLite.
"""

import os
from typing import List

from core.exceptions import ConfigurationError

RECIPE_STORE_BACKENDS = ("database", "memory")


def _env_flag(name: str, default: bool) -> bool:
    """Interpret common truthy strings ('1', 'true', 'yes', 'on')."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Container for environment-driven configuration values."""

    def __init__(self):
        # Read/Write partitioning pattern
        # In production, set WRITE_DATABASE_URL and READ_DATABASE_URL to different DB instances.
        self.write_database_url: str = os.getenv("WRITE_DATABASE_URL", "sqlite:///mealplans.db")
        self.read_database_url: str = os.getenv("READ_DATABASE_URL", self.write_database_url)

        self.log_dir: str = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        self.recipe_store_backend: str = os.getenv("RECIPE_STORE_BACKEND", "database").strip().lower()
        self.seed_recipes: bool = _env_flag("SEED_RECIPES", True)

        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        self.cors_allow_origins: List[str] = [o.strip() for o in origins.split(",") if o.strip()]

    def validate(self) -> None:
        """Raise `ConfigurationError` for values the application cannot use."""
        if self.recipe_store_backend not in RECIPE_STORE_BACKENDS:
            raise ConfigurationError(
                f"Unsupported recipe store backend '{self.recipe_store_backend}'",
                config_key="RECIPE_STORE_BACKEND",
            )


settings = Settings()

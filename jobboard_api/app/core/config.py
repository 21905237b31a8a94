"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API runs out of the box with seeded fixture data.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Job Board API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Load the fixture companies and jobs when the store is created.
    # Disable with SEED_DATA=false to start from an empty board.
    seed_data: bool = _env_bool("SEED_DATA", "true")

    # Optional integer that pins the random follower/application counts
    # and timestamps of the fixtures.
    seed_random: Optional[int] = _env_optional_int("SEED_RANDOM")

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()

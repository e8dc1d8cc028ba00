"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
override them via environment variables (``PORT`` being the usual
one).
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Playlist API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    description: str = field(
        default_factory=lambda: _env(
            "API_DESCRIPTION", "In-memory playlist service with create, list, search, update and delete."
        )
    )
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))
    log_format: str = field(
        default_factory=lambda: _env("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    log_date_format: str = field(default_factory=lambda: _env("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S"))

    # Bind address for ``run.py``.  ``PORT`` falls back to 3000 when it
    # is unset or not a number.
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 3000))

    # Path of the interactive Swagger UI.  The raw document is always
    # served at ``/openapi.json``.
    docs_url: str = field(default_factory=lambda: _env("DOCS_URL", "/api-docs"))

    # Comma‑separated list of allowed CORS origins, ``*`` for any.
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    # Load the demo playlist when the application starts.
    seed_songs: bool = field(default_factory=lambda: _env_bool("SEED_SONGS", "true"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Call ``Settings()`` again
# to pick up environment changes (e.g. in tests).
settings = Settings()

"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration at all.  Tests and
embedding code may also construct ``Settings`` explicitly and pass
it to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Record API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database holding users.  Relative paths are
    # resolved against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "records.db")

    # Number of pooled SQLite connections and the number of seconds to
    # wait for a free connection (also used as SQLite's busy timeout).
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "5.0"))

    # Number of random players seeded into the mock store at startup.
    player_seed_count: int = int(os.getenv("PLAYER_SEED_COUNT", "5"))

    # Optional shared key.  When set, every request under ``/api`` must
    # carry it in the ``X-API-Key`` header.  Empty disables the check.
    api_key: str = os.getenv("API_KEY", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

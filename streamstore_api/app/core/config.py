"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the storefront runs
out of the box against a local SQLite file with the demo catalog.  In a
production deployment override at least ``SECRET_KEY`` and
``ADMIN_PASSWORD_HASH``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "StreamStore API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 8)))

    # Single administrator account.  The password is never stored in
    # clear text: ``ADMIN_PASSWORD_HASH`` holds the ``salthex$hashhex``
    # string printed by ``hash_admin_password.py``.  With an empty hash
    # every login attempt is rejected.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password_hash: str = os.getenv("ADMIN_PASSWORD_HASH", "")

    # Path to the SQLite database.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "streamstore.db")

    # Populate an empty database with the demo catalog on startup.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "true").lower() in {"1", "true", "yes"}

    # Upper bound for request bodies.  Logos and slide images travel as
    # base64 data URIs, so the limit is generous.
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", str(50 * 1024 * 1024)))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()

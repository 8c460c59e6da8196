"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits or rolls
back as a unit (``get_cursor``) and the startup routine that applies
migrations and seeds the demo catalog (``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings
from .errors import ReferentialError, StoreError, ValidationError

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: catalog schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS services (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            logo TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            service_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            price REAL NOT NULL,
            description TEXT,
            observations TEXT,
            image TEXT,
            FOREIGN KEY(service_id) REFERENCES services(id)
        );

        CREATE TABLE IF NOT EXISTS slides (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            message TEXT NOT NULL,
            image TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: product lookups by service
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_products_service_id ON products(service_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite leaves it off by default.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor whose statements commit or roll back together.

    Everything executed inside the ``with`` block belongs to a single
    transaction: it is committed when the block exits normally and
    rolled back on any exception.  ``sqlite3`` errors are re-raised as
    ``ReferentialError`` (foreign key violations) or ``StoreError``.
    Integers outside SQLite's 64-bit range raise ``ValidationError``.
    """
    try:
        conn = get_connection()
    except sqlite3.Error as exc:
        raise StoreError(f"Database unavailable: {exc}") from exc
    try:
        yield conn.cursor()
        conn.commit()
    except sqlite3.IntegrityError as exc:
        conn.rollback()
        if "FOREIGN KEY" in str(exc).upper():
            raise ReferentialError(f"Referenced record does not exist: {exc}") from exc
        raise StoreError(f"Integrity violation: {exc}") from exc
    except sqlite3.Error as exc:
        conn.rollback()
        logger.exception("Database error")
        raise StoreError(f"Database error: {exc}") from exc
    except OverflowError as exc:
        conn.rollback()
        raise ValidationError("Identifier out of range") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  When ``settings.seed_demo_data`` is set, empty
    catalog tables are filled with the demo data.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version

        if settings.seed_demo_data:
            from .seed import seed_catalog

            seed_catalog(cursor)

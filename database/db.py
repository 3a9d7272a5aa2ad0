"""Database connection and initialization."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from config import settings
from core.exceptions import RepositoryError
from core.logger import logger


def get_db_path() -> Path:
    """Get database file path."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


def get_db(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """Get database connection."""
    conn = sqlite3.connect(str(db_path or get_db_path()))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


@contextmanager
def transaction(db_path: Optional[Path] = None) -> Iterator[sqlite3.Connection]:
    """
    Connection that commits on success, rolls back on error and always closes.

    Raises:
        RepositoryError: If SQLite fails (wraps ``sqlite3.Error``)
    """
    try:
        conn = get_db(db_path)
    except sqlite3.Error as e:
        logger.error(f"Cannot open database: {e}")
        raise RepositoryError(f"Database unavailable: {e}") from e
    try:
        yield conn
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"Database error: {e}")
        raise RepositoryError(f"Database error: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def format_timestamp(value: datetime) -> str:
    """Fixed-width ISO timestamp so text ordering matches time ordering."""
    return value.isoformat(timespec="microseconds")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def init_db(db_path: Optional[Path] = None):
    """Initialize database with tables."""
    db_path = db_path or get_db_path()
    with transaction(db_path) as conn:
        cursor = conn.cursor()

        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS users (
                id TEXT PRIMARY KEY,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL,
                full_name TEXT,
                avatar_url TEXT,
                created_at TIMESTAMP NOT NULL
            )
        """
        )

        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS sessions (
                access_token TEXT PRIMARY KEY,
                refresh_token TEXT NOT NULL,
                user_id TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """
        )

        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS cvs (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                title TEXT NOT NULL,
                cv_data TEXT NOT NULL,
                selected_template TEXT NOT NULL,
                is_default INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP NOT NULL,
                updated_at TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """
        )

        cursor.execute("CREATE INDEX IF NOT EXISTS idx_cvs_user ON cvs(user_id, updated_at)")

    logger.info(f"Database initialized at: {db_path}")


def clear_database(db_path: Optional[Path] = None) -> None:
    """Clear all rows from application tables without dropping tables."""
    init_db(db_path)
    with transaction(db_path) as conn:
        for table in ("cvs", "sessions", "users"):
            conn.execute(f"DELETE FROM {table};")
    logger.info("Database cleared (tables kept).")

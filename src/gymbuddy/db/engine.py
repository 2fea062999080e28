"""SQLite key-value storage for the persisted state."""

import sqlite3
from contextlib import closing
from pathlib import Path

from ..exceptions import PersistenceError

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DB_FILENAME = "gymbuddy.db"

# Bumping the key starts from a fresh state; old slots are not migrated.
STORAGE_KEY = "gymbuddy_state_v2"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


def _connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(db_path)


def init_db(db_path: Path) -> None:
    """Initialize the database schema."""
    try:
        with closing(_connect(db_path)) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot initialize database at {db_path}: {e}") from e


def read_slot(db_path: Path, key: str) -> str | None:
    """Read the raw value stored under ``key``, or None if absent."""
    init_db(db_path)
    try:
        with closing(_connect(db_path)) as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot read slot {key!r}: {e}") from e
    return row[0] if row else None


def write_slot(db_path: Path, key: str, value: str) -> None:
    """Overwrite the value stored under ``key`` in a single commit."""
    init_db(db_path)
    try:
        with closing(_connect(db_path)) as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )
            conn.commit()
    except sqlite3.Error as e:
        raise PersistenceError(f"Cannot write slot {key!r}: {e}") from e

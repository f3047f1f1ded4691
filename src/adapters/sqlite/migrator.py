"""
Schema migrations for the invoice database.

Each ``migrations/NNNN_*.sql`` file holds an up script, optionally followed
by a ``-- Down`` section that is never run here. A file is applied at most
once: the script and its ``schema_migrations`` row commit together.
"""

from __future__ import annotations

import logging
import re
import sqlite3
from contextlib import closing
from pathlib import Path

logger = logging.getLogger(__name__)

_DOWN_MARKER = re.compile(r"^--\s*Down\b", re.MULTILINE)


def up_script(path: Path) -> str:
    """Return the part of a migration file before its down section."""
    text = path.read_text()
    marker = _DOWN_MARKER.search(text)
    return text[: marker.start()] if marker else text


def pending_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> list[Path]:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_migrations (
            name TEXT PRIMARY KEY,
            applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """
    )
    applied = {row[0] for row in conn.execute("SELECT name FROM schema_migrations")}
    return [p for p in sorted(migrations_dir.glob("*.sql")) if p.name not in applied]


def apply_migrations(db_path: str, migrations_dir: str | Path) -> list[str]:
    """
    Bring the database at ``db_path`` up to date.

    Returns:
        Names of the files applied by this call, in order.

    Raises:
        RuntimeError: a migration failed; it is rolled back and later files are skipped.
    """
    applied_now: list[str] = []
    with closing(sqlite3.connect(db_path)) as conn:
        conn.execute("PRAGMA foreign_keys = ON;")
        for path in pending_migrations(conn, Path(migrations_dir)):
            logger.info("Applying migration %s", path.name)
            try:
                conn.executescript("BEGIN;\n" + up_script(path))
                conn.execute("INSERT INTO schema_migrations (name) VALUES (?)", (path.name,))
                conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise RuntimeError(f"Migration {path.name} failed: {e}") from e
            applied_now.append(path.name)

    logger.info("Schema up to date (%d applied)", len(applied_now))
    return applied_now

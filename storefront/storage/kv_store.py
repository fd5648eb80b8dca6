# storefront/storage/kv_store.py

"""Key-value storage backends for locally persisted state.

The cart store only needs ``get``/``set``/``remove`` by string key, so
any object with those three methods can be injected.  Two backends ship
here: an in-memory dict for tests and a single-table SQLite file that
plays the role of a browser's local storage area.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Protocol

from storefront.config.settings import Settings

logger = logging.getLogger("storefront.storage")

_SCHEMA = """\
CREATE TABLE IF NOT EXISTS kv (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class Storage(Protocol):
    """String key to string value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage, scoped to the lifetime of the object."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class SqliteStorage:
    """SQLite-backed storage; every write is committed immediately."""

    def __init__(
        self, db_path: Path | None = None,
    ) -> None:
        path = db_path or Settings.STORAGE_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(
            str(path), check_same_thread=False,
        )
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(_SCHEMA)
        logger.debug("SqliteStorage opened at %s", path)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def get(self, key: str) -> str | None:
        row = self._conn.execute(
            "SELECT value FROM kv WHERE key = ?",
            (key,),
        ).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Replace the whole value stored under *key*."""
        self._conn.execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value",
            (key, value),
        )
        self._conn.commit()

    def remove(self, key: str) -> None:
        self._conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        self._conn.commit()

"""Key-value stores backing progress, identity and rate-limit logs."""
from contextlib import closing
from datetime import datetime
from typing import Protocol

from interview_coach.db import get_connection, init_db


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self, prefix: str = "") -> list[str]: ...


class SqliteStore:
    """String key-value pairs in the ``kv_store`` table.

    Errors from sqlite3 are not caught here; callers decide how to degrade.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        init_db(db_path)

    def get(self, key: str) -> str | None:
        with closing(get_connection(self.db_path)) as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        now = datetime.now().isoformat()
        with closing(get_connection(self.db_path)) as conn:
            conn.execute(
                "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at",
                (key, value, now),
            )
            conn.commit()

    def delete(self, key: str) -> None:
        with closing(get_connection(self.db_path)) as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()

    def keys(self, prefix: str = "") -> list[str]:
        with closing(get_connection(self.db_path)) as conn:
            rows = conn.execute(
                "SELECT key FROM kv_store WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            ).fetchall()
        return [row["key"] for row in rows]


class MemoryStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self, prefix: str = "") -> list[str]:
        return sorted(k for k in self.data if k.startswith(prefix))

"""Tests for database initialization and connection management."""
from interview_coach.db import init_db, get_connection


def test_init_db_creates_tables(tmp_db):
    init_db(tmp_db)
    conn = get_connection(tmp_db)
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
    )
    tables = {row[0] for row in cursor.fetchall()}
    assert "kv_store" in tables
    conn.close()


def test_init_db_is_idempotent(tmp_db):
    init_db(tmp_db)
    init_db(tmp_db)  # should not raise
    conn = get_connection(tmp_db)
    cursor = conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
    assert len(cursor.fetchall()) > 0
    conn.close()


def test_init_db_creates_parent_dirs(tmp_path):
    db_path = str(tmp_path / "nested" / "dir" / "coach.db")
    init_db(db_path)
    assert (tmp_path / "nested" / "dir" / "coach.db").exists()


def test_get_connection_returns_row_factory(tmp_db):
    init_db(tmp_db)
    conn = get_connection(tmp_db)
    conn.execute("INSERT INTO kv_store (key, value) VALUES ('test', 'val')")
    row = conn.execute("SELECT key, value FROM kv_store WHERE key='test'").fetchone()
    assert row["key"] == "test"
    conn.close()

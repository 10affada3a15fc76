"""Time-boxed key/value cache for kanji service responses."""
import json
import logging
import sqlite3
import time

from jp_tutor.db import get_connection

logger = logging.getLogger(__name__)

CACHE_PREFIX = "kanji_cache_"
CACHE_EXPIRY = 24 * 60 * 60  # seconds


def get_cache_key(key: str) -> str:
    return f"{CACHE_PREFIX}{key}"


def get_cached(db_path: str, key: str, ttl: float = CACHE_EXPIRY, now: float | None = None):
    """Return the cached value for key, or None on a miss.

    Entries older than ttl are deleted when read. Storage errors are logged
    and reported as a miss.
    """
    now = time.time() if now is None else now
    try:
        conn = get_connection(db_path)
        try:
            row = conn.execute(
                "SELECT data, timestamp FROM cache_entries WHERE key = ?", (get_cache_key(key),)
            ).fetchone()
            if row is None:
                return None
            if now - row["timestamp"] > ttl:
                conn.execute("DELETE FROM cache_entries WHERE key = ?", (get_cache_key(key),))
                conn.commit()
                return None
            return json.loads(row["data"])
        finally:
            conn.close()
    except (sqlite3.Error, ValueError) as e:
        logger.error("Error reading from cache: %s", e)
        return None


def set_cached(db_path: str, key: str, data, now: float | None = None) -> None:
    now = time.time() if now is None else now
    payload = json.dumps(data, ensure_ascii=False)
    try:
        conn = get_connection(db_path)
        try:
            conn.execute(
                "INSERT INTO cache_entries (key, data, timestamp) VALUES (?, ?, ?) "
                "ON CONFLICT(key) DO UPDATE SET data=excluded.data, timestamp=excluded.timestamp",
                (get_cache_key(key), payload, now),
            )
            conn.commit()
        finally:
            conn.close()
    except sqlite3.Error as e:
        logger.error("Error writing to cache: %s", e)


def clear_cache(db_path: str) -> int:
    """Delete every kanji cache entry. Returns the number of rows removed."""
    conn = get_connection(db_path)
    cur = conn.execute(
        "DELETE FROM cache_entries WHERE substr(key, 1, ?) = ?",
        (len(CACHE_PREFIX), CACHE_PREFIX),
    )
    conn.commit()
    conn.close()
    logger.info("Kanji cache cleared (%d entries)", cur.rowcount)
    return cur.rowcount


def get_cache_info(db_path: str, now: float | None = None) -> dict:
    now = time.time() if now is None else now
    conn = get_connection(db_path)
    rows = conn.execute(
        "SELECT key, data, timestamp FROM cache_entries WHERE substr(key, 1, ?) = ? ORDER BY key",
        (len(CACHE_PREFIX), CACHE_PREFIX),
    ).fetchall()
    conn.close()
    total_size = 0
    items = []
    for row in rows:
        size = len(row["data"].encode("utf-8"))
        total_size += size
        age = round((now - row["timestamp"]) / 60)
        items.append({
            "key": row["key"][len(CACHE_PREFIX):],
            "size": f"{size / 1024:.2f} KB",
            "age": f"{age}m ago",
        })
    return {
        "total_items": len(rows),
        "total_size": f"{total_size / 1024:.2f} KB",
        "items": items,
    }

"""
Database connection helpers for the reminder job.

One connection per run, opened from the DSN in Settings and closed when the
get_db() block exits. Rows come back as dicts (RealDictCursor).
"""

import psycopg2
import psycopg2.extras
from contextlib import contextmanager


def get_connection(dsn: str, tz: str = ""):
    """Return a new psycopg2 connection. If tz is given, pin the session to it."""
    if not dsn:
        raise RuntimeError("No database DSN available. Set DATABASE_URL.")
    conn = psycopg2.connect(dsn, cursor_factory=psycopg2.extras.RealDictCursor)
    if tz:
        try:
            with conn.cursor() as cur:
                cur.execute("SET TIME ZONE %s", (tz,))
        except Exception:
            conn.close()
            raise
    return conn


@contextmanager
def get_db(dsn: str, tz: str = ""):
    """Context manager: yields a connection, commits on success, rolls back on error."""
    conn = get_connection(dsn, tz)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def execute(conn, query, params=None) -> list:
    """Run a read-only query on conn and return all rows."""
    with conn.cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()

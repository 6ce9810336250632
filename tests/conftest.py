import os
import sys
from datetime import datetime

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings
from models import Reservation, User


@pytest.fixture
def settings():
    return Settings(
        database_url="postgresql://reminder@localhost/reservations",
        email_user="reservations@example.com",
        email_pass="app-password",
    )


@pytest.fixture
def reservation():
    return Reservation(
        id=1,
        room_id=5,
        user_id=7,
        start_date=datetime(2025, 3, 10, 9, 0),
        end_date=datetime(2025, 3, 10, 10, 0),
        user=User(id=7, name="Ana", email="ana@example.com"),
    )


class FakeCursor:
    """Cursor that applies the DATE(start_date) = %s filter in Python."""

    def __init__(self, rows, log):
        self.rows = rows
        self.log = log
        self.result = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        self.log.append((query, params))
        if "DATE(r.start_date)" in query:
            day = params[0]
            self.result = [r for r in self.rows if r["start_date"].date() == day]

    def fetchall(self):
        return list(self.result)


class FakeConnection:
    def __init__(self, rows=None):
        self.rows = rows or []
        self.queries = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self):
        return FakeCursor(self.rows, self.queries)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


@pytest.fixture
def fake_connection():
    return FakeConnection

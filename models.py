"""
Reservation queries for the reminder job.
"""

from dataclasses import dataclass
from datetime import date, datetime

import db


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class Reservation:
    id: int
    room_id: int
    user_id: int
    start_date: datetime
    end_date: datetime
    user: User


# ---------------------------------------------------------------------------
# Reservation queries
# ---------------------------------------------------------------------------

RESERVATIONS_FOR_DATE_SQL = (
    "SELECT r.id, r.room_id, r.user_id, r.start_date, r.end_date, "
    "u.username, u.email "
    "FROM reservations r "
    "JOIN users u ON u.id = r.user_id "
    "WHERE DATE(r.start_date) = %s "
    "ORDER BY r.start_date, r.id"
)


def reservation_from_row(row: dict) -> Reservation:
    return Reservation(
        id=row["id"],
        room_id=row["room_id"],
        user_id=row["user_id"],
        start_date=row["start_date"],
        end_date=row["end_date"],
        user=User(id=row["user_id"], name=row["username"], email=row["email"]),
    )


def get_reservations_for_date(conn, day: date) -> list[Reservation]:
    """Return every reservation whose start falls on the given calendar day."""
    rows = db.execute(conn, RESERVATIONS_FOR_DATE_SQL, (day,))
    return [reservation_from_row(row) for row in rows]

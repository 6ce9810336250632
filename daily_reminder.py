#!/usr/bin/env python3
"""
Daily reservation reminder, run daily via cron at 9 AM.

Emails every user with a reservation starting today a short reminder with
the room and the start/end times.

Cron entry (runs at 9 AM daily):
  0 9 * * * cd /opt/room-reminder && /usr/bin/python3 daily_reminder.py >> /var/log/room-reminder.log 2>&1

Re-run for a missed day:
  daily_reminder.py --date 2025-03-10

Secrets are read from ./.env (or --env-file PATH) and the environment.
"""

import os
import argparse
import logging
from datetime import date

import db
import models
import email_notify
from config import Settings

log = logging.getLogger(__name__)


def run(settings: Settings, today: date = None) -> int:
    """Send today's reminders. Returns the number of reservations processed."""
    log.info("Daily reminder starting")

    if today is None:
        today = settings.today()

    with db.get_db(settings.database_url, settings.timezone) as conn:
        reservations = models.get_reservations_for_date(conn, today)

    log.info("Found %d reservation(s) for %s", len(reservations), today)

    tz = settings.tzinfo()

    sent = 0
    for res in reservations:
        message = email_notify.build_reminder(res, tz)
        if email_notify.send_email(settings, message):
            sent += 1
            log.info("Reminded %s (%s) for reservation %s in room %s",
                     res.user.name, res.user.email, res.id, res.room_id)
        else:
            log.error("Failed to remind %s (%s) for reservation %s",
                      res.user.name, res.user.email, res.id)

    log.info("Daily reminder complete: %d reservation(s) processed, %d email(s) sent",
             len(reservations), sent)
    return len(reservations)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Send today's reservation reminders.")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Day to send reminders for (YYYY-MM-DD). Defaults to today.",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Env file with DATABASE_URL and mail credentials. Defaults to ./.env.",
    )
    return parser.parse_args(argv)


def _log_level(name: str) -> int:
    """Numeric level for a LOG_LEVEL name; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def main(argv=None):
    args = _parse_args(argv)
    settings = Settings.from_env(env_file=args.env_file)
    logging.basicConfig(
        level=_log_level(os.environ.get("LOG_LEVEL", "INFO")),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    run(settings, args.date)


if __name__ == "__main__":
    main()

"""
Runtime settings for the daily reminder job.

Everything comes from the environment (or a .env file next to the script).
Build a Settings once per run and pass it to whatever needs it.
"""

import os
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv


class ConfigError(RuntimeError):
    """Raised when the environment is missing or has an unusable setting."""


def _int_env(environ, name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    database_url: str
    email_user: str = ""
    email_pass: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_timeout: int = 30
    email_from_name: str = "Room Reservation System"
    timezone: str = ""

    @classmethod
    def from_env(cls, environ=None, dotenv: bool = True, env_file: str = None) -> "Settings":
        """
        Read settings from environ (defaults to os.environ).
        With dotenv=True an env file is loaded first (env_file, or the nearest
        .env above the working directory); existing variables win.
        """
        if dotenv:
            load_dotenv(env_file or find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ

        database_url = env.get("DATABASE_URL", "").strip()
        if not database_url:
            raise ConfigError("DATABASE_URL is not set")

        settings = cls(
            database_url=database_url,
            email_user=env.get("EMAIL_USER", ""),
            email_pass=env.get("EMAIL_PASS", ""),
            smtp_host=env.get("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=_int_env(env, "SMTP_PORT", 587),
            smtp_timeout=_int_env(env, "SMTP_TIMEOUT", 30),
            email_from_name=env.get("EMAIL_FROM_NAME", "Room Reservation System"),
            timezone=env.get("REMINDER_TZ", "").strip(),
        )
        settings.tzinfo()  # fail early on a bad zone name
        return settings

    @property
    def sender(self) -> str:
        return f"{self.email_from_name} <{self.email_user}>"

    def tzinfo(self):
        """ZoneInfo for REMINDER_TZ, or None for the server's local zone."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigError(f"Unknown REMINDER_TZ {self.timezone!r}") from None

    def today(self) -> date:
        tz = self.tzinfo()
        if tz is None:
            return date.today()
        return datetime.now(tz).date()

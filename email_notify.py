"""
Email notifications for the room reservation system.

Sends through an authenticated SMTP relay (port 587, STARTTLS).
Credentials come from Settings; one SMTP connection per message.
"""

import logging
import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText

from config import Settings
from models import Reservation

log = logging.getLogger(__name__)

REMINDER_SUBJECT = "Daily Reminder"


@dataclass(frozen=True)
class Message:
    to: str
    subject: str
    body: str


def format_date(dt, tz=None) -> str:
    """
    DD.MM.YYYY HH:MM in the job's calendar.
    Aware values are converted to tz (the server's local zone when tz is None);
    naive values are printed as they are.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return dt.strftime("%d.%m.%Y %H:%M")


def build_reminder(res: Reservation, tz=None) -> Message:
    return Message(
        to=res.user.email,
        subject=REMINDER_SUBJECT,
        body=(
            f"Hello {res.user.name}, your reservation in room {res.room_id} "
            f"is scheduled to start at {format_date(res.start_date, tz)} "
            f"and end at {format_date(res.end_date, tz)}."
        ),
    )


def send_email(settings: Settings, message: Message) -> bool:
    """Send a plain-text email. Returns True on success, never raises."""
    if not message.to or not message.subject or not message.body:
        log.warning("Missing required fields: to, subject, or message, skipping")
        return False

    msg = MIMEText(message.body, "plain")
    msg["Subject"] = message.subject
    msg["From"]    = settings.sender
    msg["To"]      = message.to

    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port,
                          timeout=settings.smtp_timeout) as smtp:
            smtp.ehlo()
            smtp.starttls()
            smtp.ehlo()
            smtp.login(settings.email_user, settings.email_pass)
            refused = smtp.sendmail(settings.email_user, [message.to], msg.as_string())
    except (smtplib.SMTPException, OSError) as exc:
        log.error("Error sending email to %s: %s", message.to, exc)
        return False

    if refused:
        log.error("Recipient refused %s: %s", message.to, refused)
        return False

    log.info("Email sent to %s via %s:%s, refused recipients: %s",
             message.to, settings.smtp_host, settings.smtp_port, refused)
    return True

# hr_core/reminders/notifiers.py
"""
Outbound delivery of reminder messages.

A notifier reports success as a bool and does not raise for transport
failures; the dispatcher still guards against ones that do.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Recipient:
    account_id: UUID
    phone: str
    name: str = ""


class Notifier(Protocol):
    def notify(self, recipient: Recipient, message: str) -> bool: ...


class LoggingNotifier:
    """Development backend: the message only goes to the log."""

    def notify(self, recipient: Recipient, message: str) -> bool:
        logger.info("[SMS] To: %s, Message: %s", recipient.phone, message)
        return True


class TwilioSmsNotifier:
    API_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"

    def __init__(
        self,
        *,
        account_sid: str,
        auth_token: str,
        from_number: str,
        timeout: float = 10,
        session: requests.Session | None = None,
    ):
        if not all([account_sid, auth_token, from_number]):
            raise ImproperlyConfigured("Missing Twilio credentials (TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, TWILIO_FROM_NUMBER).")
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls) -> "TwilioSmsNotifier":
        return cls(
            account_sid=settings.TWILIO_ACCOUNT_SID,
            auth_token=settings.TWILIO_AUTH_TOKEN,
            from_number=settings.TWILIO_FROM_NUMBER,
            timeout=settings.TWILIO_TIMEOUT_SECONDS,
        )

    def notify(self, recipient: Recipient, message: str) -> bool:
        if not recipient.phone:
            logger.warning("No phone number for account %s; SMS skipped", recipient.account_id)
            return False

        url = self.API_URL.format(sid=self.account_sid)
        payload = {"To": recipient.phone, "From": self.from_number, "Body": message}
        try:
            response = self.session.post(
                url,
                data=payload,
                auth=(self.account_sid, self.auth_token),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException:
            logger.exception("SMS to %s failed", recipient.phone)
            return False

        logger.info("SMS sent to %s", recipient.phone)
        return True


def get_notifier() -> Notifier:
    """Instantiate the backend named by settings.REMINDER_NOTIFIER."""
    backend = import_string(settings.REMINDER_NOTIFIER)
    factory = getattr(backend, "from_settings", None)
    return factory() if factory is not None else backend()

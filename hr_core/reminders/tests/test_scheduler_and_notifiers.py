import uuid

import pytest
import requests
from django.core.exceptions import ImproperlyConfigured

from hr_core.common.clock import FixedClock
from hr_core.reminders.notifiers import LoggingNotifier, Recipient, TwilioSmsNotifier, get_notifier
from hr_core.reminders.scheduler import ReminderScheduler
from hr_core.tests.helpers import local_dt


class CountingDispatcher:
    def __init__(self, error=None):
        self.error = error
        self.ticks = 0

    def tick(self):
        self.ticks += 1
        if self.error is not None:
            raise self.error
        return "report"


def test_seconds_until_next_tick():
    clock = FixedClock(local_dt(2024, 1, 1, 9, 2))

    assert ReminderScheduler(CountingDispatcher(), clock=clock).seconds_until_next_tick() == 60
    assert ReminderScheduler(CountingDispatcher(), interval_seconds=300, clock=clock).seconds_until_next_tick() == 180


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        ReminderScheduler(CountingDispatcher(), interval_seconds=0)


@pytest.mark.django_db
def test_run_once_survives_a_failing_tick():
    dispatcher = CountingDispatcher(error=RuntimeError("db down"))
    scheduler = ReminderScheduler(dispatcher)

    assert scheduler.run_once() is None
    assert scheduler.run_once() is None
    assert dispatcher.ticks == 2


@pytest.mark.django_db
def test_run_once_returns_report():
    assert ReminderScheduler(CountingDispatcher()).run_once() == "report"


def test_start_and_stop():
    scheduler = ReminderScheduler(CountingDispatcher())

    scheduler.start()
    assert scheduler.running

    scheduler.stop(timeout=5)
    assert not scheduler.running


class FakeResponse:
    def __init__(self, status_code=201):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def _twilio(session):
    return TwilioSmsNotifier(account_sid="AC123", auth_token="secret", from_number="+15550000000", session=session)


RECIPIENT = Recipient(account_id=uuid.uuid4(), phone="+919800000001", name="Asha Rao")


def test_twilio_posts_message():
    session = FakeSession()

    assert _twilio(session).notify(RECIPIENT, "Take it") is True

    url, kwargs = session.calls[0]
    assert url == "https://api.twilio.com/2010-04-01/Accounts/AC123/Messages.json"
    assert kwargs["data"] == {"To": "+919800000001", "From": "+15550000000", "Body": "Take it"}
    assert kwargs["auth"] == ("AC123", "secret")


def test_twilio_transport_errors_return_false():
    assert _twilio(FakeSession(error=requests.ConnectionError("no route"))).notify(RECIPIENT, "x") is False
    assert _twilio(FakeSession(response=FakeResponse(500))).notify(RECIPIENT, "x") is False


def test_twilio_skips_missing_phone():
    session = FakeSession()
    recipient = Recipient(account_id=uuid.uuid4(), phone="")

    assert _twilio(session).notify(recipient, "x") is False
    assert session.calls == []


def test_twilio_requires_credentials():
    with pytest.raises(ImproperlyConfigured):
        TwilioSmsNotifier(account_sid="", auth_token="secret", from_number="+1555")


def test_get_notifier_follows_settings(settings):
    assert isinstance(get_notifier(), LoggingNotifier)

    settings.REMINDER_NOTIFIER = "hr_core.reminders.notifiers.TwilioSmsNotifier"
    settings.TWILIO_ACCOUNT_SID = "AC123"
    settings.TWILIO_AUTH_TOKEN = "secret"
    settings.TWILIO_FROM_NUMBER = "+15550000000"

    notifier = get_notifier()
    assert isinstance(notifier, TwilioSmsNotifier)
    assert notifier.from_number == "+15550000000"

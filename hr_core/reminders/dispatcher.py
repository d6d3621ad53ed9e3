# hr_core/reminders/dispatcher.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from django.db import DatabaseError
from django.utils import timezone

from hr_core.common.clock import Clock, SystemClock
from hr_core.reminders.models import MedicineReminder
from hr_core.reminders.notifiers import Notifier, Recipient, get_notifier
from hr_core.reminders.selectors import due_reminders

logger = logging.getLogger(__name__)

REMINDER_MESSAGE = "Medicine Reminder: Take {name} ({dosage}) now ({time})"


@dataclass
class DispatchReport:
    current_time: str
    today: date
    matched: int = 0
    sent: int = 0
    skipped: int = 0
    failed: int = 0


def format_message(reminder: MedicineReminder) -> str:
    return REMINDER_MESSAGE.format(
        name=reminder.medicine_name,
        dosage=reminder.dosage,
        time=reminder.reminder_time,
    )


def sent_on(reminder: MedicineReminder, day: date) -> bool:
    if reminder.last_sent is None:
        return False
    return timezone.localtime(reminder.last_sent).date() == day


class ReminderDispatcher:
    """
    One pass over the reminders due this minute.

    At most one delivery attempt per reminder per local day: last_sent is
    written after every attempt, successful or not. One failing reminder
    never stops the rest of the tick.
    """

    def __init__(self, *, notifier: Notifier | None = None, clock: Clock | None = None):
        self.notifier = notifier if notifier is not None else get_notifier()
        self.clock = clock or SystemClock()

    def tick(self) -> DispatchReport:
        now = self.clock.now()
        report = DispatchReport(current_time=now.strftime("%H:%M"), today=now.date())

        for reminder in due_reminders(current_time=report.current_time, today=report.today):
            report.matched += 1
            if sent_on(reminder, report.today):
                report.skipped += 1
                continue

            delivered = self._deliver(reminder)
            if not self._mark_sent(reminder, now):
                report.failed += 1
                continue

            if delivered:
                report.sent += 1
            else:
                report.failed += 1

        logger.info(
            "Reminder tick %s %s: matched=%d sent=%d skipped=%d failed=%d",
            report.today,
            report.current_time,
            report.matched,
            report.sent,
            report.skipped,
            report.failed,
        )
        return report

    def _deliver(self, reminder: MedicineReminder) -> bool:
        recipient = Recipient(
            account_id=reminder.patient_id,
            phone=reminder.patient.phone,
            name=reminder.patient.name,
        )
        try:
            delivered = bool(self.notifier.notify(recipient, format_message(reminder)))
        except Exception:
            logger.exception("Reminder %s: notifier raised", reminder.id)
            return False

        if delivered:
            logger.info("Reminder %s sent for %s", reminder.id, reminder.medicine_name)
        else:
            logger.warning("Reminder %s: delivery failed", reminder.id)
        return delivered

    def _mark_sent(self, reminder: MedicineReminder, at: datetime) -> bool:
        reminder.last_sent = at
        try:
            reminder.save(update_fields=["last_sent", "updated_at"])
        except DatabaseError:
            logger.exception("Reminder %s: could not record last_sent", reminder.id)
            return False
        return True

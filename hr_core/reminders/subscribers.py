# hr_core/reminders/subscribers.py
from __future__ import annotations

from uuid import UUID

from hr_core.common.events import subscribe
from hr_core.records.models import Prescription
from hr_core.reminders.services import ReminderService


@subscribe("prescription.saved")
def on_prescription_saved(payload: dict) -> None:
    prescription = Prescription.objects.get(id=UUID(payload["prescription_id"]))
    ReminderService.regenerate_for_prescription(prescription)

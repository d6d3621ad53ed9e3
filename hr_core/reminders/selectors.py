# hr_core/reminders/selectors.py
from __future__ import annotations

from datetime import date
from uuid import UUID

from django.db.models import QuerySet

from hr_core.reminders.models import MedicineReminder


def reminders_for_patient(*, patient_id: UUID, family_member_id: UUID | None = None) -> QuerySet[MedicineReminder]:
    qs = MedicineReminder.objects.filter(patient_id=patient_id)
    if family_member_id is not None:
        qs = qs.filter(family_member_id=family_member_id)
    else:
        qs = qs.filter(family_member__isnull=True)
    return qs.order_by("reminder_time", "medicine_name")


def upcoming_reminders_for_patient(*, patient_id: UUID, today: date) -> QuerySet[MedicineReminder]:
    return MedicineReminder.objects.filter(
        patient_id=patient_id,
        is_active=True,
        completed=False,
        end_date__gt=today,
    ).order_by("reminder_time", "medicine_name")


def due_reminders(*, current_time: str, today: date) -> QuerySet[MedicineReminder]:
    """Reminders whose slot is `current_time` and whose window contains `today`."""
    return (
        MedicineReminder.objects.filter(
            is_active=True,
            completed=False,
            reminder_time=current_time,
            start_date__lte=today,
            end_date__gt=today,
        )
        .select_related("patient")
        .order_by("id")
    )

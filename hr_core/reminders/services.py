# hr_core/reminders/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import transaction

from hr_core.common import errors
from hr_core.iam.context import ActorContext
from hr_core.records.models import Prescription
from hr_core.records.subjects import RealPatientRef
from hr_core.reminders.generator import generate
from hr_core.reminders.models import MedicineReminder

logger = logging.getLogger(__name__)


class ReminderService:
    @staticmethod
    @transaction.atomic
    def regenerate_for_prescription(prescription: Prescription) -> list[MedicineReminder]:
        """
        Replace the prescription's reminders with a freshly generated set.
        Only registered real patients get reminders; for other subjects the
        old rows are still removed.
        """
        removed, _ = MedicineReminder.objects.filter(prescription=prescription).delete()

        subject = prescription.subject
        if not isinstance(subject, RealPatientRef) or not subject.is_registered:
            return []

        reminders = [
            MedicineReminder(
                patient_id=subject.patient_id,
                family_member_id=prescription.family_member_id,
                prescription=prescription,
                medicine_name=spec.medicine_name,
                dosage=spec.dosage,
                reminder_time=spec.reminder_time,
                start_date=spec.start_date,
                end_date=spec.end_date,
            )
            for spec in generate(prescription)
        ]
        created = MedicineReminder.objects.bulk_create(reminders)
        logger.info(
            "Prescription %s: %d reminders replaced by %d",
            prescription.id,
            removed,
            len(created),
        )
        return created

    @staticmethod
    def _owned(*, ctx: ActorContext, reminder_id: UUID) -> MedicineReminder:
        reminder = (
            MedicineReminder.objects.select_for_update()
            .filter(id=reminder_id, patient_id=ctx.account_id)
            .first()
        )
        if reminder is None:
            raise errors.NotFound("Reminder not found.")
        return reminder

    @staticmethod
    @transaction.atomic
    def complete(*, ctx: ActorContext, reminder_id: UUID) -> MedicineReminder:
        reminder = ReminderService._owned(ctx=ctx, reminder_id=reminder_id)
        if not reminder.completed:
            reminder.completed = True
            reminder.is_active = False
            reminder.save(update_fields=["completed", "is_active", "updated_at"])
        return reminder

    @staticmethod
    @transaction.atomic
    def toggle(*, ctx: ActorContext, reminder_id: UUID) -> MedicineReminder:
        reminder = ReminderService._owned(ctx=ctx, reminder_id=reminder_id)
        if reminder.completed:
            raise errors.InvalidTransition("Completed reminders cannot be re-activated.")
        reminder.is_active = not reminder.is_active
        reminder.save(update_fields=["is_active", "updated_at"])
        return reminder

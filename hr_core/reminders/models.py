# hr_core/reminders/models.py
from __future__ import annotations

from datetime import date

from django.db import models

from hr_core.common.models import UUIDModel


class MedicineReminder(UUIDModel):
    """
    One daily slot for one medicine of a prescription.
    Due on days in [start_date, end_date); end_date is exclusive.
    """
    patient = models.ForeignKey(
        "iam.Account",
        on_delete=models.CASCADE,
        related_name="medicine_reminders",
    )
    family_member = models.ForeignKey(
        "patients.FamilyMember",
        on_delete=models.CASCADE,
        related_name="medicine_reminders",
        null=True,
        blank=True,
    )
    prescription = models.ForeignKey(
        "records.Prescription",
        on_delete=models.CASCADE,
        related_name="reminders",
    )

    medicine_name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=128)
    reminder_time = models.CharField(max_length=5)  # "HH:MM", local time
    start_date = models.DateField()
    end_date = models.DateField()

    is_active = models.BooleanField(default=True)
    completed = models.BooleanField(default=False)
    last_sent = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["reminder_time", "medicine_name"]
        indexes = [
            models.Index(fields=["reminder_time", "is_active", "completed"]),
            models.Index(fields=["patient", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.medicine_name} @ {self.reminder_time}"

    def is_due_on(self, day: date) -> bool:
        return self.start_date <= day < self.end_date

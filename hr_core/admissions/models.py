# hr_core/admissions/models.py
from __future__ import annotations

from django.db import models
from django.db.models import Q
from django.utils import timezone

from hr_core.common.models import UUIDModel


class Admission(UUIDModel):
    """
    A known patient admitted to a hospital. While active it grants the
    hospital access to the patient's records without consent.

    `patient` is resolved by phone at admission time and may be empty when the
    patient has not registered yet; the phone snapshot then stands in for it.
    """
    hospital = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="hospital_admissions",
    )
    patient = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="admissions",
        null=True,
        blank=True,
    )
    patient_name = models.CharField(max_length=255)
    patient_phone = models.CharField(max_length=32, db_index=True)
    notes = models.TextField(blank=True, default="")

    is_active = models.BooleanField(default=True, db_index=True)
    admitted_at = models.DateTimeField(default=timezone.now)
    discharged_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-admitted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["hospital", "patient_phone"],
                condition=Q(is_active=True),
                name="uq_admission_active_per_hospital_phone",
            ),
        ]
        indexes = [
            models.Index(fields=["hospital", "is_active"]),
            models.Index(fields=["patient", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.patient_name} @ {self.hospital_id}"

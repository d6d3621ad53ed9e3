# hr_core/emergency/models.py
from __future__ import annotations

from django.db import models
from django.db.models import Q
from django.utils import timezone

from hr_core.common.models import UUIDModel
from hr_core.emergency.identity import reference_for


class EmergencyPatient(UUIDModel):
    """
    Unidentified patient admitted to an emergency bed.

    Identified only by a hospital-scoped temporary id until discharge.
    Discharge is terminal: the row is kept for the records filed against it.
    """
    hospital = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="emergency_patients",
    )
    temporary_id = models.CharField(max_length=16, db_index=True)
    bed_label = models.CharField(max_length=32)
    notes = models.TextField(blank=True, default="")

    is_active = models.BooleanField(default=True, db_index=True)
    admitted_at = models.DateTimeField(default=timezone.now)
    discharged_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-admitted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["hospital", "bed_label"],
                condition=Q(is_active=True),
                name="uq_emergency_active_bed_per_hospital",
            ),
            models.UniqueConstraint(
                fields=["hospital", "temporary_id"],
                condition=Q(is_active=True),
                name="uq_emergency_active_temp_id_per_hospital",
            ),
        ]
        indexes = [
            models.Index(fields=["hospital", "is_active"]),
        ]

    def __str__(self) -> str:
        return f"{self.reference} (bed {self.bed_label})"

    @property
    def reference(self) -> str:
        return reference_for(self.temporary_id)

    @property
    def display_name(self) -> str:
        return f"Emergency Patient - Bed {self.bed_label}"

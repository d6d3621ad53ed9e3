# hr_core/consents/models.py
from __future__ import annotations

from django.db import models
from django.db.models import Q
from django.utils import timezone

from hr_core.common.models import UUIDModel


class ConsentStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    GRANTED = "GRANTED", "Granted"
    DENIED = "DENIED", "Denied"
    REVOKED = "REVOKED", "Revoked"


class Consent(UUIDModel):
    """
    A hospital's request to see a patient's records, and the patient's answer.

    Transitions:
      PENDING -> GRANTED | DENIED   (patient responds)
      GRANTED -> REVOKED            (hospital revokes)
    DENIED and REVOKED are terminal; a new request creates a new row.
    Name/phone are snapshots taken at request time.
    """
    TERMINAL_STATUSES = (ConsentStatus.DENIED, ConsentStatus.REVOKED)

    patient = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="consents_given",
    )
    hospital = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="consents_requested",
    )
    patient_name = models.CharField(max_length=255)
    patient_phone = models.CharField(max_length=32)

    status = models.CharField(
        max_length=16,
        choices=ConsentStatus.choices,
        default=ConsentStatus.PENDING,
        db_index=True,
    )
    requested_at = models.DateTimeField(default=timezone.now, db_index=True)
    responded_at = models.DateTimeField(null=True, blank=True)
    revoked_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-requested_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["patient", "hospital"],
                condition=Q(status=ConsentStatus.PENDING),
                name="uq_consent_one_pending_per_pair",
            ),
            models.UniqueConstraint(
                fields=["patient", "hospital"],
                condition=Q(status=ConsentStatus.GRANTED),
                name="uq_consent_one_granted_per_pair",
            ),
        ]
        indexes = [
            models.Index(fields=["hospital", "status"]),
            models.Index(fields=["patient", "status"]),
        ]

    def __str__(self) -> str:
        return f"{self.patient_name} -> {self.hospital_id} [{self.status}]"

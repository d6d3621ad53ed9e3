from __future__ import annotations

from django.db import models
from django.utils import timezone

from hr_core.common.models import UUIDModel


class NotificationType(models.TextChoices):
    CONSENT_REQUEST = "consent_request", "Consent request"
    CONSENT_RESPONSE = "consent_response", "Consent response"
    CONSENT_REVOKED = "consent_revoked", "Consent revoked"
    PRESCRIPTION = "prescription", "Prescription"
    REPORT = "report", "Report"


class Notification(UUIDModel):
    """
    In-app notification for one account.
    `related_id` loosely points at the consent / prescription / report it is about.
    """
    recipient = models.ForeignKey(
        "iam.Account",
        on_delete=models.CASCADE,
        related_name="notifications",
    )

    type = models.CharField(max_length=32, choices=NotificationType.choices, db_index=True)
    title = models.CharField(max_length=255)
    message = models.TextField(blank=True, default="")
    related_id = models.UUIDField(null=True, blank=True, db_index=True)

    is_read = models.BooleanField(default=False, db_index=True)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["recipient", "is_read"]),
        ]

    def mark_read(self) -> None:
        if not self.is_read:
            self.is_read = True
            self.read_at = timezone.now()

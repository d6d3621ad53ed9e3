# hr_core/audit/models.py
from django.db import models

from hr_core.common.models import UUIDModel


class AuditEvent(UUIDModel):
    """
    Immutable audit record of consent, admission and emergency transitions.
    Links are loose (UUID fields) so the trail outlives the rows it describes.
    """
    event_code = models.CharField(max_length=128, db_index=True)  # e.g. "consent.granted"
    entity_type = models.CharField(max_length=128, db_index=True)  # e.g. "Consent"
    entity_id = models.UUIDField(db_index=True)

    actor_account_id = models.UUIDField(null=True, blank=True, db_index=True)

    occurred_at = models.DateTimeField(auto_now_add=True, db_index=True)
    metadata = models.JSONField(default=dict)

    class Meta:
        db_table = "audit_audit_event"
        indexes = [
            models.Index(fields=["entity_type", "entity_id"]),
            models.Index(fields=["actor_account_id", "occurred_at"]),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("AuditEvent is immutable.")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("AuditEvent is immutable.")

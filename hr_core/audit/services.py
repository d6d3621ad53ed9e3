# hr_core/audit/services.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from hr_core.audit.models import AuditEvent

logger = logging.getLogger(__name__)


class AuditService:
    """
    Append-only trail of access-relevant transitions: consent requests and
    responses, revocations, admissions and emergency admit/discharge.

    Written inside the caller's transaction so a rolled-back transition
    leaves no trail.
    """

    @staticmethod
    def log(
        *,
        event_code: str,
        entity_type: str,
        entity_id: UUID,
        actor_account_id: UUID | None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AuditEvent:
        event = AuditEvent.objects.create(
            event_code=event_code,
            entity_type=entity_type,
            entity_id=entity_id,
            actor_account_id=actor_account_id,
            metadata=metadata or {},
        )
        logger.debug("Audit %s %s:%s by %s", event_code, entity_type, entity_id, actor_account_id)
        return event

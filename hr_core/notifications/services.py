from __future__ import annotations

import logging
from uuid import UUID

from django.db import transaction

from hr_core.common import errors
from hr_core.iam.context import ActorContext
from hr_core.notifications.models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    @staticmethod
    @transaction.atomic
    def notify(
        *,
        recipient_id: UUID,
        type: str,
        title: str,
        message: str = "",
        related_id: UUID | None = None,
    ) -> Notification:
        notification = Notification.objects.create(
            recipient_id=recipient_id,
            type=type,
            title=title,
            message=message,
            related_id=related_id,
        )
        logger.debug("Notification %s (%s) queued for %s", notification.id, type, recipient_id)
        return notification

    @staticmethod
    @transaction.atomic
    def mark_read(*, ctx: ActorContext, notification_id: UUID) -> Notification:
        notification = (
            Notification.objects.select_for_update()
            .filter(id=notification_id, recipient_id=ctx.account_id)
            .first()
        )
        if notification is None:
            raise errors.NotFound("Notification not found.")

        if not notification.is_read:
            notification.mark_read()
            notification.save(update_fields=["is_read", "read_at", "updated_at"])
        return notification

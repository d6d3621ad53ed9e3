from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hr_core.notifications.models import Notification


def notifications_for(*, recipient_id: UUID, unread_only: bool = False) -> QuerySet[Notification]:
    qs = Notification.objects.filter(recipient_id=recipient_id)
    if unread_only:
        qs = qs.filter(is_read=False)
    return qs.order_by("-created_at")

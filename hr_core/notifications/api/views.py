# hr_core/notifications/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from hr_core.common.api.pagination import DefaultPagination
from hr_core.common.api.params import path_uuid
from hr_core.common.permissions import AccountPermission
from hr_core.iam.context import ActorContextMixin
from hr_core.notifications.api.serializers import NotificationSerializer
from hr_core.notifications.models import Notification
from hr_core.notifications.selectors import notifications_for
from hr_core.notifications.services import NotificationService


class NotificationViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [AccountPermission]
    serializer_class = NotificationSerializer
    pagination_class = DefaultPagination
    queryset = Notification.objects.none()

    def list(self, request):
        unread_only = request.query_params.get("is_read") == "false"
        qs = notifications_for(recipient_id=self.ctx().account_id, unread_only=unread_only)

        paginator = self.pagination_class()
        page = paginator.paginate_queryset(qs, request, view=self)
        return paginator.get_paginated_response(NotificationSerializer(page, many=True).data)

    @action(methods=["POST"], detail=True, url_path="mark-read")
    def mark_read(self, request, pk=None):
        notification = NotificationService.mark_read(ctx=self.ctx(), notification_id=path_uuid(pk))
        return Response(NotificationSerializer(notification).data, status=status.HTTP_200_OK)

# hr_core/reminders/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from hr_core.common.api.params import path_uuid, query_uuid
from hr_core.common.permissions import ReminderPermission
from hr_core.iam.context import ActorContextMixin
from hr_core.reminders.api.serializers import MedicineReminderSerializer
from hr_core.reminders.models import MedicineReminder
from hr_core.reminders.selectors import reminders_for_patient
from hr_core.reminders.services import ReminderService


class ReminderViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [ReminderPermission]
    serializer_class = MedicineReminderSerializer
    queryset = MedicineReminder.objects.none()

    def list(self, request):
        qs = reminders_for_patient(
            patient_id=self.ctx().account_id,
            family_member_id=query_uuid(request, "family_member_id"),
        )
        return Response(MedicineReminderSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @action(methods=["POST"], detail=True, url_path="complete")
    def complete(self, request, pk=None):
        reminder = ReminderService.complete(ctx=self.ctx(), reminder_id=path_uuid(pk))
        return Response(MedicineReminderSerializer(reminder).data, status=status.HTTP_200_OK)

    @action(methods=["POST"], detail=True, url_path="toggle")
    def toggle(self, request, pk=None):
        reminder = ReminderService.toggle(ctx=self.ctx(), reminder_id=path_uuid(pk))
        return Response(MedicineReminderSerializer(reminder).data, status=status.HTTP_200_OK)

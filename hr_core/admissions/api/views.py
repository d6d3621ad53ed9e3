# hr_core/admissions/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from hr_core.admissions.api.serializers import AdmissionCreateSerializer, AdmissionSerializer
from hr_core.admissions.models import Admission
from hr_core.admissions.selectors import admissions_for
from hr_core.admissions.services import AdmissionService
from hr_core.common.api.params import path_uuid
from hr_core.common.permissions import AdmissionPermission
from hr_core.iam.context import ActorContextMixin


class AdmissionViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [AdmissionPermission]
    serializer_class = AdmissionSerializer
    queryset = Admission.objects.none()

    def list(self, request):
        active_only = request.query_params.get("active") == "true"
        qs = admissions_for(hospital_id=self.ctx().account_id, active_only=active_only)
        return Response(AdmissionSerializer(qs[:200], many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = AdmissionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        admission = AdmissionService.admit(ctx=self.ctx(), **ser.validated_data)
        return Response(AdmissionSerializer(admission).data, status=status.HTTP_201_CREATED)

    @action(methods=["POST"], detail=True, url_path="discharge")
    def discharge(self, request, pk=None):
        admission = AdmissionService.discharge(ctx=self.ctx(), admission_id=path_uuid(pk))
        return Response(AdmissionSerializer(admission).data, status=status.HTTP_200_OK)

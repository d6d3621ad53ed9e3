# hr_core/emergency/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from hr_core.common.api.params import path_uuid
from hr_core.common.permissions import EmergencyPatientPermission
from hr_core.emergency.api.serializers import (
    EmergencyAdmitSerializer,
    EmergencyPatientDetailSerializer,
    EmergencyPatientSerializer,
)
from hr_core.emergency.models import EmergencyPatient
from hr_core.emergency.selectors import emergency_patients_for, get_emergency_patient
from hr_core.emergency.services import EmergencyService
from hr_core.iam.context import ActorContextMixin
from hr_core.records.api.serializers import HospitalReportSerializer, ReportUploadSerializer
from hr_core.records.selectors import prescriptions_for_emergency_patient, reports_for_emergency_patient
from hr_core.records.services import ReportService


class EmergencyPatientViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [EmergencyPatientPermission]
    serializer_class = EmergencyPatientSerializer
    queryset = EmergencyPatient.objects.none()

    def list(self, request):
        active_only = request.query_params.get("include_discharged") != "true"
        qs = emergency_patients_for(hospital_id=self.ctx().account_id, active_only=active_only)
        return Response(EmergencyPatientSerializer(qs[:200], many=True).data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):
        hospital_id = self.ctx().account_id
        patient = get_emergency_patient(hospital_id=hospital_id, emergency_patient_id=path_uuid(pk))

        context = {
            "prescriptions": prescriptions_for_emergency_patient(hospital_id=hospital_id, emergency_patient_id=patient.id),
            "reports": reports_for_emergency_patient(hospital_id=hospital_id, emergency_patient_id=patient.id),
        }
        return Response(EmergencyPatientDetailSerializer(patient, context=context).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = EmergencyAdmitSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        patient = EmergencyService.admit(ctx=self.ctx(), **ser.validated_data)
        return Response(EmergencyPatientSerializer(patient).data, status=status.HTTP_201_CREATED)

    @action(methods=["POST"], detail=True, url_path="discharge")
    def discharge(self, request, pk=None):
        patient = EmergencyService.discharge(ctx=self.ctx(), emergency_patient_id=path_uuid(pk))
        return Response(EmergencyPatientSerializer(patient).data, status=status.HTTP_200_OK)

    @action(methods=["POST"], detail=True, url_path="reports")
    def reports(self, request, pk=None):
        ser = ReportUploadSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        report = ReportService.upload_emergency_report(
            ctx=self.ctx(),
            emergency_patient_id=path_uuid(pk),
            **ser.validated_data,
        )
        return Response(HospitalReportSerializer(report).data, status=status.HTTP_201_CREATED)

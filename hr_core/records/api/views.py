# hr_core/records/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.response import Response

from hr_core.common.api.params import path_uuid, query_uuid
from hr_core.common.permissions import HospitalPermission, LabReportPermission, PatientRecordPermission
from hr_core.iam.context import ActorContextMixin
from hr_core.patients.selectors import get_family_member
from hr_core.records.api.serializers import (
    HospitalPrescriptionSerializer,
    HospitalReportSerializer,
    LabReportSerializer,
    LabReportUploadSerializer,
    PatientRecordSerializer,
    PrescriptionCreateSerializer,
    PrescriptionSerializer,
    PrescriptionUpdateSerializer,
    ReportSerializer,
)
from hr_core.records.filters import filter_reports
from hr_core.records.models import MedicalReport, Prescription
from hr_core.records.selectors import (
    patient_record_for_hospital,
    prescriptions_for_hospital,
    prescriptions_for_patient,
    reports_for_hospital,
    reports_for_lab,
    reports_for_patient,
)
from hr_core.records.services import PrescriptionService, RecordLinkService, ReportService

LIST_LIMIT = 200


class PatientRecordMixin(ActorContextMixin):
    def family_member_id(self):
        family_member_id = query_uuid(self.request, "family_member_id")
        if family_member_id is not None:
            get_family_member(patient_id=self.ctx().account_id, family_member_id=family_member_id)
        return family_member_id


class PatientPrescriptionViewSet(PatientRecordMixin, viewsets.ViewSet):
    permission_classes = [PatientRecordPermission]
    serializer_class = PrescriptionSerializer
    queryset = Prescription.objects.none()

    def list(self, request):
        patient = self.account()
        family_member_id = self.family_member_id()
        RecordLinkService.claim_by_phone(patient=patient)

        qs = prescriptions_for_patient(patient=patient, family_member_id=family_member_id)
        return Response(PrescriptionSerializer(qs[:LIST_LIMIT], many=True).data, status=status.HTTP_200_OK)


class PatientReportViewSet(PatientRecordMixin, viewsets.ViewSet):
    permission_classes = [PatientRecordPermission]
    serializer_class = ReportSerializer
    queryset = MedicalReport.objects.none()

    def list(self, request):
        patient = self.account()
        family_member_id = self.family_member_id()
        RecordLinkService.claim_by_phone(patient=patient)

        qs = reports_for_patient(patient=patient, family_member_id=family_member_id)
        return Response(ReportSerializer(qs[:LIST_LIMIT], many=True).data, status=status.HTTP_200_OK)


class HospitalPrescriptionViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [HospitalPermission]
    serializer_class = HospitalPrescriptionSerializer
    queryset = Prescription.objects.none()

    def list(self, request):
        qs = prescriptions_for_hospital(hospital_id=self.ctx().account_id)
        return Response(HospitalPrescriptionSerializer(qs[:LIST_LIMIT], many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = PrescriptionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        prescription = PrescriptionService.create(ctx=self.ctx(), **ser.validated_data)
        return Response(PrescriptionSerializer(prescription).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        ser = PrescriptionUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        prescription = PrescriptionService.update(
            ctx=self.ctx(),
            prescription_id=path_uuid(pk),
            **ser.validated_data,
        )
        return Response(PrescriptionSerializer(prescription).data, status=status.HTTP_200_OK)


class HospitalReportViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [HospitalPermission]
    serializer_class = HospitalReportSerializer
    queryset = MedicalReport.objects.none()

    def list(self, request):
        qs = filter_reports(request.query_params, reports_for_hospital(hospital_id=self.ctx().account_id))
        return Response(HospitalReportSerializer(qs[:LIST_LIMIT], many=True).data, status=status.HTTP_200_OK)


class HospitalPatientRecordViewSet(ActorContextMixin, viewsets.ViewSet):
    """Access-gated: active admission or granted consent."""
    permission_classes = [HospitalPermission]
    serializer_class = PatientRecordSerializer

    def retrieve(self, request, pk=None):
        record = patient_record_for_hospital(hospital_id=self.ctx().account_id, patient_id=path_uuid(pk))
        return Response(PatientRecordSerializer(record).data, status=status.HTTP_200_OK)


class LabReportViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [LabReportPermission]
    serializer_class = LabReportSerializer
    queryset = MedicalReport.objects.none()

    def list(self, request):
        qs = filter_reports(request.query_params, reports_for_lab(lab_id=self.ctx().account_id))
        return Response(LabReportSerializer(qs[:LIST_LIMIT], many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = LabReportUploadSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        report = ReportService.upload_lab_report(ctx=self.ctx(), **ser.validated_data)
        return Response(LabReportSerializer(report).data, status=status.HTTP_201_CREATED)

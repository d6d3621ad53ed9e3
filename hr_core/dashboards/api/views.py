# hr_core/dashboards/api/views.py
from __future__ import annotations

from django.utils import timezone
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from hr_core.admissions.api.serializers import AdmittedPatientSerializer
from hr_core.common.permissions import HospitalPermission, PatientRecordPermission
from hr_core.consents.api.serializers import ConsentSerializer
from hr_core.dashboards.selectors import hospital_dashboard, patient_dashboard
from hr_core.emergency.api.serializers import EmergencyPatientSerializer
from hr_core.iam.context import ActorContextMixin
from hr_core.patients.api.serializers import FamilyMemberSerializer
from hr_core.records.api.serializers import PrescriptionSerializer, ReportSerializer
from hr_core.reminders.api.serializers import MedicineReminderSerializer


class HospitalDashboardView(ActorContextMixin, APIView):
    permission_classes = [HospitalPermission]

    @extend_schema(
        responses={
            200: inline_serializer(
                name="HospitalDashboard",
                fields={
                    "prescriptions_today": serializers.IntegerField(),
                    "admitted_patients": AdmittedPatientSerializer(many=True),
                    "emergency_patients": EmergencyPatientSerializer(many=True),
                    "pending_consents": ConsentSerializer(many=True),
                },
            )
        },
        tags=["Dashboards"],
    )
    def get(self, request):
        board = hospital_dashboard(hospital_id=self.ctx().account_id, today=timezone.localdate())
        return Response(
            {
                "prescriptions_today": board.prescriptions_today,
                "admitted_patients": AdmittedPatientSerializer(board.admitted_patients, many=True).data,
                "emergency_patients": EmergencyPatientSerializer(board.emergency_patients, many=True).data,
                "pending_consents": ConsentSerializer(board.pending_consents, many=True).data,
            },
            status=status.HTTP_200_OK,
        )


class PatientDashboardView(ActorContextMixin, APIView):
    permission_classes = [PatientRecordPermission]

    @extend_schema(
        responses={
            200: inline_serializer(
                name="PatientDashboard",
                fields={
                    "upcoming_reminders": MedicineReminderSerializer(many=True),
                    "recent_prescriptions": PrescriptionSerializer(many=True),
                    "recent_reports": ReportSerializer(many=True),
                    "family_members": FamilyMemberSerializer(many=True),
                    "unread_notifications": serializers.IntegerField(),
                },
            )
        },
        tags=["Dashboards"],
    )
    def get(self, request):
        board = patient_dashboard(patient=self.account(), today=timezone.localdate())
        return Response(
            {
                "upcoming_reminders": MedicineReminderSerializer(board.upcoming_reminders, many=True).data,
                "recent_prescriptions": PrescriptionSerializer(board.recent_prescriptions, many=True).data,
                "recent_reports": ReportSerializer(board.recent_reports, many=True).data,
                "family_members": FamilyMemberSerializer(board.family_members, many=True).data,
                "unread_notifications": board.unread_notifications,
            },
            status=status.HTTP_200_OK,
        )

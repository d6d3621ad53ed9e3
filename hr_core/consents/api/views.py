# hr_core/consents/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from hr_core.common.api.params import path_uuid
from hr_core.common.permissions import HospitalConsentPermission, PatientConsentPermission
from hr_core.consents.api.serializers import (
    ConsentRequestSerializer,
    ConsentRespondSerializer,
    ConsentSerializer,
    PatientConsentSerializer,
)
from hr_core.consents.models import Consent
from hr_core.consents.selectors import list_for_hospital, list_for_patient, list_granted_for_hospital
from hr_core.consents.services import ConsentLedger
from hr_core.iam.context import ActorContextMixin


class HospitalConsentViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [HospitalConsentPermission]
    serializer_class = ConsentSerializer
    queryset = Consent.objects.none()

    def list(self, request):
        qs = list_for_hospital(hospital_id=self.ctx().account_id)
        return Response(ConsentSerializer(qs[:200], many=True).data, status=status.HTTP_200_OK)

    def create(self, request):
        ser = ConsentRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        consent = ConsentLedger.request_by_phone(
            ctx=self.ctx(),
            patient_phone=ser.validated_data["patient_phone"],
            patient_name=ser.validated_data["patient_name"],
        )
        return Response(ConsentSerializer(consent).data, status=status.HTTP_201_CREATED)

    @action(methods=["GET"], detail=False, url_path="granted")
    def granted(self, request):
        qs = list_granted_for_hospital(hospital_id=self.ctx().account_id)
        return Response(ConsentSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @action(methods=["POST"], detail=True, url_path="revoke")
    def revoke(self, request, pk=None):
        consent = ConsentLedger.revoke(ctx=self.ctx(), consent_id=path_uuid(pk))
        return Response(ConsentSerializer(consent).data, status=status.HTTP_200_OK)


class PatientConsentViewSet(ActorContextMixin, viewsets.ViewSet):
    permission_classes = [PatientConsentPermission]
    serializer_class = PatientConsentSerializer
    queryset = Consent.objects.none()

    def list(self, request):
        qs = list_for_patient(patient_id=self.ctx().account_id)
        return Response(PatientConsentSerializer(qs[:200], many=True).data, status=status.HTTP_200_OK)

    @action(methods=["POST"], detail=True, url_path="respond")
    def respond(self, request, pk=None):
        ser = ConsentRespondSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        consent = ConsentLedger.respond(
            ctx=self.ctx(),
            consent_id=path_uuid(pk),
            action=ser.validated_data["action"],
        )
        return Response(PatientConsentSerializer(consent).data, status=status.HTTP_200_OK)

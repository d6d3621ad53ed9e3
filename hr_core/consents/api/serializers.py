# hr_core/consents/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hr_core.consents.models import Consent
from hr_core.consents.services import ACTION_DENY, ACTION_GRANT


class ConsentRequestSerializer(serializers.Serializer):
    patient_phone = serializers.CharField(max_length=32)
    patient_name = serializers.CharField(max_length=255)


class ConsentRespondSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=[ACTION_GRANT, ACTION_DENY])


class ConsentSerializer(serializers.ModelSerializer):
    """Hospital view of its own requests."""

    class Meta:
        model = Consent
        fields = [
            "id",
            "patient_id",
            "patient_name",
            "patient_phone",
            "status",
            "requested_at",
            "responded_at",
            "revoked_at",
        ]
        read_only_fields = fields


class PatientConsentSerializer(serializers.ModelSerializer):
    """Patient view: who asked, and what was answered."""
    hospital_name = serializers.CharField(source="hospital.display_name", read_only=True)

    class Meta:
        model = Consent
        fields = [
            "id",
            "hospital_id",
            "hospital_name",
            "status",
            "requested_at",
            "responded_at",
            "revoked_at",
        ]
        read_only_fields = fields

from rest_framework import serializers

from hr_core.admissions.models import Admission


class AdmissionCreateSerializer(serializers.Serializer):
    patient_phone = serializers.CharField(max_length=32)
    patient_name = serializers.CharField(max_length=255)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class AdmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admission
        fields = [
            "id",
            "patient_id",
            "patient_name",
            "patient_phone",
            "notes",
            "is_active",
            "admitted_at",
            "discharged_at",
        ]
        read_only_fields = fields


class AdmittedPatientSerializer(serializers.ModelSerializer):
    """Dashboard projection: no patient name, phone or id."""

    class Meta:
        model = Admission
        fields = ["id", "notes", "admitted_at"]
        read_only_fields = fields

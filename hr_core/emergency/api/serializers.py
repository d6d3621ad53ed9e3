from rest_framework import serializers

from hr_core.emergency.models import EmergencyPatient
from hr_core.records.api.serializers import HospitalPrescriptionSerializer, HospitalReportSerializer


class EmergencyAdmitSerializer(serializers.Serializer):
    bed_label = serializers.CharField(max_length=32)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class EmergencyPatientSerializer(serializers.ModelSerializer):
    reference = serializers.CharField(read_only=True)
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = EmergencyPatient
        fields = [
            "id",
            "temporary_id",
            "reference",
            "display_name",
            "bed_label",
            "notes",
            "is_active",
            "admitted_at",
            "discharged_at",
        ]
        read_only_fields = fields


class EmergencyPatientDetailSerializer(EmergencyPatientSerializer):
    prescriptions = serializers.SerializerMethodField()
    reports = serializers.SerializerMethodField()

    class Meta(EmergencyPatientSerializer.Meta):
        fields = EmergencyPatientSerializer.Meta.fields + ["prescriptions", "reports"]
        read_only_fields = fields

    def get_prescriptions(self, obj):
        return HospitalPrescriptionSerializer(self.context.get("prescriptions", []), many=True).data

    def get_reports(self, obj):
        return HospitalReportSerializer(self.context.get("reports", []), many=True).data

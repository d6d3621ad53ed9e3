# hr_core/records/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hr_core.records.models import MedicalReport, Prescription, PrescriptionMedicine
from hr_core.records.subjects import SubjectKind


class MedicineInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    dosage = serializers.CharField(max_length=128)
    timing = serializers.CharField(max_length=64, required=False, allow_blank=True, default="")
    duration_days = serializers.IntegerField(min_value=1)


class PrescriptionCreateSerializer(serializers.Serializer):
    patient_phone = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    patient_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    emergency_patient_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    family_member_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    doctor_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    prescribed_on = serializers.DateField(required=False, allow_null=True, default=None)
    medicines = MedicineInputSerializer(many=True, allow_empty=False)

    def validate(self, attrs):
        has_emergency = attrs.get("emergency_patient_id") is not None
        has_phone = bool((attrs.get("patient_phone") or "").strip())
        if has_emergency == has_phone:
            raise serializers.ValidationError("Give either emergency_patient_id or patient_phone + patient_name.")
        if has_phone and not (attrs.get("patient_name") or "").strip():
            raise serializers.ValidationError({"patient_name": "This field is required."})
        return attrs


class PrescriptionUpdateSerializer(serializers.Serializer):
    medicines = MedicineInputSerializer(many=True, allow_empty=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    doctor_name = serializers.CharField(max_length=255, required=False, allow_blank=True)


class MedicineSerializer(serializers.ModelSerializer):
    class Meta:
        model = PrescriptionMedicine
        fields = ["name", "dosage", "timing", "duration_days"]
        read_only_fields = fields


def _emergency_reference(obj) -> str | None:
    return obj.patient_phone if obj.subject_kind == SubjectKind.EMERGENCY else None


class PrescriptionSerializer(serializers.ModelSerializer):
    medicines = MedicineSerializer(many=True, read_only=True)

    class Meta:
        model = Prescription
        fields = [
            "id",
            "subject_kind",
            "patient_id",
            "patient_name",
            "patient_phone",
            "family_member_id",
            "hospital_id",
            "hospital_name",
            "doctor_name",
            "prescribed_on",
            "notes",
            "medicines",
            "created_at",
        ]
        read_only_fields = fields


class HospitalPrescriptionSerializer(serializers.ModelSerializer):
    """Hospital-wide listing: no patient name, phone or id."""
    medicines = MedicineSerializer(many=True, read_only=True)
    emergency_reference = serializers.SerializerMethodField()

    class Meta:
        model = Prescription
        fields = [
            "id",
            "subject_kind",
            "emergency_reference",
            "doctor_name",
            "prescribed_on",
            "notes",
            "medicines",
            "created_at",
        ]
        read_only_fields = fields

    def get_emergency_reference(self, obj) -> str | None:
        return _emergency_reference(obj)


class ReportSerializer(serializers.ModelSerializer):
    class Meta:
        model = MedicalReport
        fields = [
            "id",
            "subject_kind",
            "patient_id",
            "patient_name",
            "patient_phone",
            "family_member_id",
            "uploaded_by",
            "hospital_name",
            "lab_name",
            "report_type",
            "report_name",
            "description",
            "file_reference",
            "file_name",
            "reported_on",
            "created_at",
        ]
        read_only_fields = fields


class HospitalReportSerializer(serializers.ModelSerializer):
    """Hospital-wide listing: no patient name, phone or id."""
    emergency_reference = serializers.SerializerMethodField()

    class Meta:
        model = MedicalReport
        fields = [
            "id",
            "subject_kind",
            "emergency_reference",
            "uploaded_by",
            "lab_name",
            "report_type",
            "report_name",
            "description",
            "file_reference",
            "file_name",
            "reported_on",
            "created_at",
        ]
        read_only_fields = fields

    def get_emergency_reference(self, obj) -> str | None:
        return _emergency_reference(obj)


class LabReportSerializer(serializers.ModelSerializer):
    patient_matched = serializers.SerializerMethodField()

    class Meta:
        model = MedicalReport
        fields = [
            "id",
            "patient_name",
            "patient_phone",
            "patient_matched",
            "hospital_name",
            "report_type",
            "report_name",
            "description",
            "file_reference",
            "file_name",
            "reported_on",
            "created_at",
        ]
        read_only_fields = fields

    def get_patient_matched(self, obj) -> bool:
        return obj.patient_id is not None


class ReportUploadSerializer(serializers.Serializer):
    report_type = serializers.CharField(max_length=128)
    report_name = serializers.CharField(max_length=255)
    file_reference = serializers.CharField(max_length=512)
    file_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    reported_on = serializers.DateField(required=False, allow_null=True, default=None)


class LabReportUploadSerializer(ReportUploadSerializer):
    patient_phone = serializers.CharField(max_length=32)
    patient_name = serializers.CharField(max_length=255)
    hospital_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class PatientSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    phone = serializers.CharField()


class PatientRecordSerializer(serializers.Serializer):
    patient = PatientSummarySerializer()
    access = serializers.CharField(source="grant.value")
    consent_id = serializers.UUIDField(allow_null=True)
    prescriptions = PrescriptionSerializer(many=True)
    reports = ReportSerializer(many=True)

from django.contrib import admin

from hr_core.records.models import MedicalReport, Prescription, PrescriptionMedicine


class PrescriptionMedicineInline(admin.TabularInline):
    model = PrescriptionMedicine
    extra = 0


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ("id", "patient_name", "hospital_name", "subject_kind", "prescribed_on")
    list_filter = ("subject_kind", "prescribed_on")
    search_fields = ("patient_name", "patient_phone", "hospital_name", "doctor_name")
    raw_id_fields = ("hospital", "patient", "family_member", "emergency_patient")
    inlines = [PrescriptionMedicineInline]


@admin.register(MedicalReport)
class MedicalReportAdmin(admin.ModelAdmin):
    list_display = ("report_name", "report_type", "uploaded_by", "patient_name", "reported_on")
    list_filter = ("uploaded_by", "report_type", "subject_kind")
    search_fields = ("report_name", "patient_name", "patient_phone", "lab_name", "hospital_name")
    raw_id_fields = ("hospital", "lab", "patient", "family_member", "emergency_patient")

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

from django.contrib import admin

from hr_core.admissions.models import Admission


@admin.register(Admission)
class AdmissionAdmin(admin.ModelAdmin):
    list_display = ("patient_name", "patient_phone", "hospital", "is_active", "admitted_at", "discharged_at")
    list_filter = ("is_active",)
    search_fields = ("patient_name", "patient_phone")
    raw_id_fields = ("hospital", "patient")

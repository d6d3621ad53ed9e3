from django.contrib import admin

from hr_core.emergency.models import EmergencyPatient


@admin.register(EmergencyPatient)
class EmergencyPatientAdmin(admin.ModelAdmin):
    list_display = ("temporary_id", "bed_label", "hospital", "is_active", "admitted_at", "discharged_at")
    list_filter = ("is_active",)
    search_fields = ("temporary_id", "bed_label")
    raw_id_fields = ("hospital",)

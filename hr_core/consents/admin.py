from django.contrib import admin

from hr_core.consents.models import Consent


@admin.register(Consent)
class ConsentAdmin(admin.ModelAdmin):
    list_display = ("patient_name", "patient_phone", "hospital", "status", "requested_at", "responded_at", "revoked_at")
    list_filter = ("status",)
    search_fields = ("patient_name", "patient_phone")
    raw_id_fields = ("patient", "hospital")
    readonly_fields = ("requested_at", "responded_at", "revoked_at")

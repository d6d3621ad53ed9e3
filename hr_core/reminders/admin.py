from django.contrib import admin

from hr_core.reminders.models import MedicineReminder


@admin.register(MedicineReminder)
class MedicineReminderAdmin(admin.ModelAdmin):
    list_display = ("medicine_name", "dosage", "reminder_time", "patient", "start_date", "end_date", "is_active", "completed", "last_sent")
    list_filter = ("is_active", "completed", "reminder_time")
    search_fields = ("medicine_name", "patient__name", "patient__phone")
    raw_id_fields = ("patient", "family_member", "prescription")

from rest_framework import serializers

from hr_core.reminders.models import MedicineReminder


class MedicineReminderSerializer(serializers.ModelSerializer):
    class Meta:
        model = MedicineReminder
        fields = [
            "id",
            "prescription_id",
            "family_member_id",
            "medicine_name",
            "dosage",
            "reminder_time",
            "start_date",
            "end_date",
            "is_active",
            "completed",
            "last_sent",
        ]
        read_only_fields = fields

from django.contrib import admin

from hr_core.notifications.models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "recipient", "is_read", "created_at")
    list_filter = ("type", "is_read")
    search_fields = ("title", "message")
    raw_id_fields = ("recipient",)

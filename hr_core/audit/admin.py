# hr_core/audit/admin.py
from django.contrib import admin

from hr_core.audit.models import AuditEvent


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    """Read-only: audit events are immutable."""
    list_display = ("occurred_at", "event_code", "entity_type", "entity_id", "actor_account_id")
    list_filter = ("event_code", "entity_type")
    search_fields = ("entity_id", "actor_account_id")
    ordering = ("-occurred_at",)
    date_hierarchy = "occurred_at"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

# hr_core/iam/admin.py
from django.contrib import admin

from hr_core.iam.models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("name", "organization_name", "role", "phone", "is_verified", "created_at")
    list_filter = ("role", "is_verified")
    search_fields = ("name", "organization_name", "phone", "user__username")
    raw_id_fields = ("user",)

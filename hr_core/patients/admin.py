from django.contrib import admin

from hr_core.patients.models import FamilyMember


@admin.register(FamilyMember)
class FamilyMemberAdmin(admin.ModelAdmin):
    list_display = ("name", "relationship", "age", "gender", "patient")
    search_fields = ("name", "patient__name", "patient__phone")
    raw_id_fields = ("patient",)

# hr_core/patients/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hr_core.patients.models import FamilyMember, Gender


class FamilyMemberCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    age = serializers.IntegerField(min_value=1, max_value=150)
    gender = serializers.ChoiceField(choices=Gender.choices)
    relationship = serializers.CharField(max_length=64)


class FamilyMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = FamilyMember
        fields = ["id", "name", "age", "gender", "relationship", "created_at"]
        read_only_fields = fields

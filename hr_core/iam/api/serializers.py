# hr_core/iam/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hr_core.iam.models import Account


class LoginRequestSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()


class DetailResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()


class AccountSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source="user.username", read_only=True)
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = Account
        fields = [
            "id",
            "username",
            "role",
            "name",
            "organization_name",
            "display_name",
            "phone",
            "address",
            "is_verified",
            "created_at",
        ]
        read_only_fields = fields

from rest_framework import serializers

from hr_core.notifications.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = [
            "id",
            "type",
            "title",
            "message",
            "related_id",
            "is_read",
            "read_at",
            "created_at",
        ]
        read_only_fields = fields

from rest_framework import serializers
from .models import Reminder, ReminderType, ReminderDay


class ReminderFilterSerializer(serializers.Serializer):
    """
    Query Parameters:
        type (str): income or expense
        active (bool): true/false
    """

    type = serializers.ChoiceField(choices=ReminderType.choices, required=False)
    active = serializers.BooleanField(required=False, allow_null=True, default=None)


class ReminderInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False)
    type = serializers.ChoiceField(choices=ReminderType.choices)
    reminder_day = serializers.ChoiceField(choices=ReminderDay.choices)
    active = serializers.BooleanField(default=True)


class ReminderSerializer(serializers.ModelSerializer):

    class Meta:
        model = Reminder
        fields = [
            'id',
            'type',
            'reminder_day',
            'active',
            'user',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

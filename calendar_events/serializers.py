from rest_framework import serializers

from core.serializers import OwnedPrimaryKeyRelatedField
from notes.models import Note
from .models import CalendarEvent


class CalendarEventSerializer(serializers.ModelSerializer):
    note = OwnedPrimaryKeyRelatedField(queryset=Note.objects.all(), allow_null=True, required=False)

    class Meta:
        model = CalendarEvent
        fields = ["id", "title", "date", "note", "kind", "color"]
        read_only_fields = ["id", "kind"]

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title cannot be blank.")
        return value

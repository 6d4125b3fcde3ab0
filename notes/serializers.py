from rest_framework import serializers

from tags.serializers import TagNamesField, TagSummarySerializer, resolve_tag_names
from .models import Note


class NoteSerializer(serializers.ModelSerializer):
    tags = TagNamesField()

    class Meta:
        model = Note
        fields = ["id", "title", "content", "tags", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["tags"] = TagSummarySerializer(instance.tags.all(), many=True).data
        return data

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title cannot be blank.")
        return value

    def create(self, validated_data):
        tags = validated_data.pop("tags", [])
        note = Note.objects.create(**validated_data)
        if tags:
            note.tags.set(resolve_tag_names(note.user, tags))
        return note

    def update(self, instance, validated_data):
        tags = validated_data.pop("tags", None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        if tags is not None:
            instance.tags.set(resolve_tag_names(instance.user, tags))
        return instance


class NoteSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Note
        fields = ["id", "title", "updated_at"]


class NoteAutosaveSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200, required=False)
    content = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title cannot be blank.")
        return value

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Send a title or content to save.")
        return attrs

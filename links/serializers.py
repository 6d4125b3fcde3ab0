from rest_framework import serializers

from core.serializers import OwnedPrimaryKeyRelatedField
from notes.models import Note
from tags.serializers import TagNamesField, TagSummarySerializer, resolve_tag_names
from .models import Link


class LinkSerializer(serializers.ModelSerializer):
    url = serializers.URLField(
        max_length=2000,
        error_messages={"invalid": "Enter a valid URL."},
    )
    tags = TagNamesField()
    note = OwnedPrimaryKeyRelatedField(queryset=Note.objects.all(), allow_null=True, required=False)

    class Meta:
        model = Link
        fields = ["id", "url", "title", "description", "tags", "note", "created_at"]
        read_only_fields = ["id", "created_at"]

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
        link = Link.objects.create(**validated_data)
        if tags:
            link.tags.set(resolve_tag_names(link.user, tags))
        return link

    def update(self, instance, validated_data):
        tags = validated_data.pop("tags", None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        if tags is not None:
            instance.tags.set(resolve_tag_names(instance.user, tags))
        return instance

from django.db import IntegrityError, transaction
from rest_framework import serializers

from .logic import usage_count
from .models import Tag, next_color

DUPLICATE_TAG_MESSAGE = "A tag with this name already exists."


class TagSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ["id", "name", "color"]


class TagSerializer(serializers.ModelSerializer):
    usage_count = serializers.SerializerMethodField()

    class Meta:
        model = Tag
        fields = ["id", "name", "color", "usage_count"]
        read_only_fields = ["id"]

    def get_usage_count(self, obj):
        count = getattr(obj, "usage_count", None)
        if count is None:
            count = usage_count(obj)
        return count

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Tag name cannot be blank.")
        qs = Tag.objects.filter(user=self.context["user"], name__iexact=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError(DUPLICATE_TAG_MESSAGE)
        return value

    def create(self, validated_data):
        if not validated_data.get("color"):
            validated_data["color"] = next_color(validated_data["user"])
        try:
            with transaction.atomic():
                return Tag.objects.create(**validated_data)
        except IntegrityError:
            # lost a race against a concurrent create with the same name
            raise serializers.ValidationError({"name": [DUPLICATE_TAG_MESSAGE]})

    def update(self, instance, validated_data):
        try:
            with transaction.atomic():
                return super().update(instance, validated_data)
        except IntegrityError:
            raise serializers.ValidationError({"name": [DUPLICATE_TAG_MESSAGE]})


def resolve_tag_names(user, names):
    """
    Map tag names to the user's Tag rows, matching case-insensitively and
    creating the ones that do not exist yet. Order of first appearance is kept.
    """
    tags = []
    seen = set()
    for raw in names:
        name = str(raw).strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        tag = Tag.objects.filter(user=user, name__iexact=name).first()
        if tag is None:
            try:
                with transaction.atomic():
                    tag = Tag.objects.create(user=user, name=name, color=next_color(user))
            except IntegrityError:
                # created concurrently under the same name; use that one
                tag = Tag.objects.get(user=user, name__iexact=name)
        tags.append(tag)
    return tags


class TagNamesField(serializers.ListField):
    """Write-side tag list: names in, resolved to the user's tags on save."""

    child = serializers.CharField(max_length=50)

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("write_only", True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        names = super().to_internal_value(data)
        return [name.strip() for name in names if name.strip()]

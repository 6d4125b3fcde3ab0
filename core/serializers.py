from rest_framework import serializers


class OwnedPrimaryKeyRelatedField(serializers.PrimaryKeyRelatedField):
    """Primary key reference restricted to objects owned by the requesting user."""

    def get_queryset(self):
        qs = super().get_queryset()
        user = self.context.get("user")
        if user is None or not user.is_authenticated:
            return qs.none()
        return qs.filter(user=user)


def parse_date_param(params, name):
    """Read an optional ISO date query parameter, 400 on garbage."""
    raw = params.get(name)
    if not raw:
        return None
    try:
        return serializers.DateField().to_internal_value(raw)
    except serializers.ValidationError:
        raise serializers.ValidationError({name: ["Use the YYYY-MM-DD format."]})


def parse_id_param(params, name):
    """Read an optional integer id query parameter, 400 on garbage."""
    raw = params.get(name)
    if not raw:
        return None
    if not raw.isdigit():
        raise serializers.ValidationError({name: ["Must be an id."]})
    return int(raw)

from rest_framework.permissions import BasePermission


class IsOwner(BasePermission):
    """
    Object-level check that the requesting user owns the object.
    Every study entity carries a 'user' foreign key.
    """

    def has_object_permission(self, request, view, obj):
        return getattr(obj, "user_id", None) == getattr(request.user, "id", None)

from rest_framework.permissions import IsAuthenticated

from .permissions import IsOwner


class OwnedQuerysetMixin:
    """
    Shared store behaviour for per-user entities.

    Views set ``model`` and get list/create/update/delete scoped to
    ``request.user``; objects of other users are never visible.
    """

    model = None
    ordering = None
    permission_classes = [IsAuthenticated, IsOwner]

    def get_base_queryset(self):
        user = self.request.user
        if not user or not user.is_authenticated:
            return self.model.objects.none()
        return self.model.objects.filter(user=user)

    def get_queryset(self):
        qs = self.get_base_queryset()
        if self.ordering:
            qs = qs.order_by(*self.ordering)
        return qs

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["user"] = self.request.user
        return context

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

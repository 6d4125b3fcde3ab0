from rest_framework import generics

from core.serializers import parse_id_param
from core.views import OwnedQuerysetMixin
from .models import Link
from .serializers import LinkSerializer


class LinkListCreateView(OwnedQuerysetMixin, generics.ListCreateAPIView):
    model = Link
    serializer_class = LinkSerializer
    ordering = ["-created_at", "-id"]

    def get_queryset(self):
        qs = super().get_queryset().prefetch_related("tags")
        tag = self.request.query_params.get("tag")
        if tag:
            qs = qs.filter(tags__name__iexact=tag.strip())
        note_id = parse_id_param(self.request.query_params, "note")
        if note_id is not None:
            qs = qs.filter(note_id=note_id)
        return qs


class LinkDetailView(OwnedQuerysetMixin, generics.RetrieveUpdateDestroyAPIView):
    model = Link
    serializer_class = LinkSerializer

    def get_queryset(self):
        return super().get_queryset().prefetch_related("tags")

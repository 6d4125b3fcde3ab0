import logging

from rest_framework import generics
from rest_framework.response import Response

from core.views import OwnedQuerysetMixin
from links.models import Link
from links.serializers import LinkSerializer
from notes.models import Note
from notes.serializers import NoteSerializer
from .logic import with_usage_counts
from .models import Tag
from .serializers import TagSerializer

logger = logging.getLogger(__name__)


class TagListCreateView(OwnedQuerysetMixin, generics.ListCreateAPIView):
    model = Tag
    serializer_class = TagSerializer
    ordering = ["name"]

    def get_queryset(self):
        return with_usage_counts(super().get_queryset())


class TagDetailView(OwnedQuerysetMixin, generics.RetrieveUpdateDestroyAPIView):
    model = Tag
    serializer_class = TagSerializer

    def get_queryset(self):
        return with_usage_counts(super().get_queryset())

    def perform_destroy(self, instance):
        logger.info("Deleting tag %s used by %s items", instance.pk, instance.usage_count)
        instance.delete()


class TagItemsView(OwnedQuerysetMixin, generics.GenericAPIView):
    """Notes and links carrying one tag."""

    model = Tag

    def get(self, request, pk):
        tag = self.get_object()
        notes = Note.objects.filter(user=request.user, tags=tag).prefetch_related("tags").order_by("-updated_at")
        links = Link.objects.filter(user=request.user, tags=tag).prefetch_related("tags").order_by("-created_at", "-id")
        context = self.get_serializer_context()
        return Response(
            {
                "tag": TagSerializer(tag, context=context).data,
                "notes": NoteSerializer(notes, many=True, context=context).data,
                "links": LinkSerializer(links, many=True, context=context).data,
            }
        )

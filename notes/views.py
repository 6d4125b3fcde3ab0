import logging

from django.db import transaction
from django.db.models import Q
from rest_framework import generics, status
from rest_framework.response import Response

from calendar_events.scheduling import schedule_reviews
from core.views import OwnedQuerysetMixin
from . import autosave
from .logic import find_backlinks, resolve_links
from .models import Note
from .serializers import NoteAutosaveSerializer, NoteSerializer, NoteSummarySerializer

logger = logging.getLogger(__name__)


class NoteListCreateView(OwnedQuerysetMixin, generics.ListCreateAPIView):
    model = Note
    serializer_class = NoteSerializer
    ordering = ["-updated_at"]

    def get_queryset(self):
        qs = super().get_queryset().prefetch_related("tags")
        tag = self.request.query_params.get("tag")
        if tag:
            qs = qs.filter(tags__name__iexact=tag.strip())
        query = self.request.query_params.get("q")
        if query:
            qs = qs.filter(
                Q(title__icontains=query)
                | Q(content__icontains=query)
                | Q(tags__name__icontains=query)
            ).distinct()
        return qs

    def perform_create(self, serializer):
        # note and its review batch land together or not at all
        with transaction.atomic():
            note = serializer.save(user=self.request.user)
            schedule_reviews(note)


class NoteDetailView(OwnedQuerysetMixin, generics.RetrieveUpdateDestroyAPIView):
    model = Note
    serializer_class = NoteSerializer

    def get_queryset(self):
        return super().get_queryset().prefetch_related("tags")

    def perform_destroy(self, instance):
        # linked calendar events go with the note (FK cascade)
        note_id = instance.pk
        instance.delete()
        logger.info("Deleted note %s and its calendar events", note_id)


class NoteLinksView(OwnedQuerysetMixin, generics.GenericAPIView):
    model = Note

    def get(self, request, pk):
        note = self.get_object()
        notes = list(self.get_base_queryset().order_by("created_at", "id"))
        return Response(
            {
                "linked_notes": NoteSummarySerializer(resolve_links(note, notes), many=True).data,
                "backlinks": NoteSummarySerializer(find_backlinks(note, notes), many=True).data,
            }
        )


class NoteAutosaveView(OwnedQuerysetMixin, generics.GenericAPIView):
    model = Note
    serializer_class = NoteAutosaveSerializer

    def post(self, request, pk):
        note = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        autosave.autosaver.schedule(request.user.id, note.pk, **serializer.validated_data)
        return Response({"detail": "Autosave scheduled."}, status=status.HTTP_202_ACCEPTED)

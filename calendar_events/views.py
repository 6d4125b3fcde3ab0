from rest_framework import generics, serializers
from rest_framework.exceptions import PermissionDenied

from core.serializers import parse_date_param, parse_id_param
from core.views import OwnedQuerysetMixin
from .models import CalendarEvent
from .serializers import CalendarEventSerializer


class EventListCreateView(OwnedQuerysetMixin, generics.ListCreateAPIView):
    model = CalendarEvent
    serializer_class = CalendarEventSerializer
    ordering = ["date", "id"]

    def get_queryset(self):
        qs = super().get_queryset()
        params = self.request.query_params

        day = parse_date_param(params, "date")
        if day:
            qs = qs.filter(date=day)
        start = parse_date_param(params, "start")
        if start:
            qs = qs.filter(date__gte=start)
        end = parse_date_param(params, "end")
        if end:
            qs = qs.filter(date__lte=end)

        note_id = parse_id_param(params, "note")
        if note_id is not None:
            qs = qs.filter(note_id=note_id)

        kind = params.get("kind")
        if kind:
            if kind not in dict(CalendarEvent.KIND_CHOICES):
                raise serializers.ValidationError({"kind": ["Must be 'normal' or 'review'."]})
            qs = qs.filter(kind=kind)
        return qs

    def perform_create(self, serializer):
        # review events only come from the scheduler
        serializer.save(user=self.request.user, kind=CalendarEvent.KIND_NORMAL)


class EventDetailView(OwnedQuerysetMixin, generics.RetrieveUpdateDestroyAPIView):
    model = CalendarEvent
    serializer_class = CalendarEventSerializer

    def update(self, request, *args, **kwargs):
        # checked before validation so every edit attempt gets the same answer
        if self.get_object().is_review:
            raise PermissionDenied("Review events cannot be edited. Delete them instead.")
        return super().update(request, *args, **kwargs)

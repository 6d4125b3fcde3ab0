from django.db.models import Count
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from calendar_events.models import CalendarEvent
from calendar_events.serializers import CalendarEventSerializer
from core import clock
from notes.models import Note
from notes.serializers import NoteSummarySerializer
from tags.models import Tag
from .logic import week_bounds

RECENT_NOTES_LIMIT = 5
TOP_TAGS_LIMIT = 5


class DashboardView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = request.user
        week_start, week_end = week_bounds(clock.today())

        notes = Note.objects.filter(user=user)
        events = CalendarEvent.objects.filter(user=user)
        week_events = events.filter(date__range=(week_start, week_end)).order_by("date", "id")

        top_tags = (
            Tag.objects.filter(user=user)
            .annotate(note_count=Count("notes"))
            .filter(note_count__gt=0)
            .order_by("-note_count", "name")[:TOP_TAGS_LIMIT]
        )

        return Response(
            {
                "week_start": week_start,
                "week_end": week_end,
                "stats": {
                    "notes": notes.count(),
                    "tags": Tag.objects.filter(user=user).count(),
                    "week_events": week_events.count(),
                    "review_events": events.filter(kind=CalendarEvent.KIND_REVIEW).count(),
                },
                "recent_notes": NoteSummarySerializer(
                    notes.order_by("-updated_at")[:RECENT_NOTES_LIMIT], many=True
                ).data,
                "top_tags": [
                    {"id": tag.id, "name": tag.name, "color": tag.color, "count": tag.note_count}
                    for tag in top_tags
                ],
                "week_events": CalendarEventSerializer(week_events, many=True).data,
            }
        )

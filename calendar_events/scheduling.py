"""Spaced-repetition review events generated when a note is created."""
import logging
from datetime import timedelta

from django.db import DatabaseError, transaction
from django.utils import timezone

from core.exceptions import PersistenceError
from .models import CalendarEvent, REVIEW_EVENT_COLOR

logger = logging.getLogger(__name__)

REVIEW_OFFSETS = (1, 3, 7, 30)
REVIEW_TITLE_TEMPLATE = "Review: {title}"


def review_dates(base_date):
    # date + timedelta moves whole calendar days, unaffected by DST shifts
    return [base_date + timedelta(days=days) for days in REVIEW_OFFSETS]


def build_review_events(note, base_date):
    """Unsaved review events for ``note``, one per offset."""
    title = REVIEW_TITLE_TEMPLATE.format(title=note.title)
    return [
        CalendarEvent(
            user_id=note.user_id,
            title=title,
            date=day,
            note=note,
            kind=CalendarEvent.KIND_REVIEW,
            color=REVIEW_EVENT_COLOR,
        )
        for day in review_dates(base_date)
    ]


def schedule_reviews(note, base_date=None):
    """
    Persist the review events for ``note`` as one all-or-nothing batch.

    ``base_date`` defaults to the local calendar day the note was created.
    Raises PersistenceError if the batch cannot be written; no events are
    left behind in that case.
    """
    if base_date is None:
        base_date = timezone.localtime(note.created_at).date()
    events = build_review_events(note, base_date)
    try:
        with transaction.atomic():
            created = CalendarEvent.objects.bulk_create(events)
    except DatabaseError:
        logger.exception("Failed to schedule review events for note %s", note.pk)
        raise PersistenceError("Could not schedule review events for this note.")
    logger.info("Scheduled %d review events for note %s", len(created), note.pk)
    return created

"""Tests for spaced-repetition review event generation."""

from datetime import date
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from calendar_events.models import CalendarEvent, NORMAL_EVENT_COLOR, REVIEW_EVENT_COLOR
from calendar_events.scheduling import build_review_events, review_dates, schedule_reviews
from core.exceptions import PersistenceError
from notes.models import Note


class TestReviewDates:
    def test_fixed_offsets(self):
        assert review_dates(date(2024, 1, 10)) == [
            date(2024, 1, 11),
            date(2024, 1, 13),
            date(2024, 1, 17),
            date(2024, 2, 9),
        ]

    def test_calendar_day_addition_across_dst_change(self):
        # US clocks moved forward on 2024-03-10
        assert review_dates(date(2024, 3, 9)) == [
            date(2024, 3, 10),
            date(2024, 3, 12),
            date(2024, 3, 16),
            date(2024, 4, 8),
        ]

    def test_leap_day(self):
        assert review_dates(date(2024, 2, 28))[0] == date(2024, 2, 29)


@pytest.mark.django_db
class TestScheduleReviews:
    def test_build_does_not_persist(self, make_note):
        note = make_note("X")
        events = build_review_events(note, date(2024, 1, 10))
        assert len(events) == 4
        assert all(event.pk is None for event in events)
        assert not CalendarEvent.objects.exists()

    def test_persists_four_review_events(self, make_note, frozen_now):
        note = make_note("X")
        schedule_reviews(note)

        events = list(CalendarEvent.objects.filter(note=note).order_by("date"))
        assert [e.date.isoformat() for e in events] == ["2024-01-11", "2024-01-13", "2024-01-17", "2024-02-09"]
        for event in events:
            assert event.title == "Review: X"
            assert event.kind == CalendarEvent.KIND_REVIEW
            assert event.color == REVIEW_EVENT_COLOR
            assert event.color != NORMAL_EVENT_COLOR
            assert event.user_id == note.user_id

    def test_explicit_base_date(self, make_note):
        note = make_note("Y")
        created = schedule_reviews(note, base_date=date(2023, 12, 31))
        assert [e.date for e in created][0] == date(2024, 1, 1)

    def test_batch_failure_leaves_no_events(self, make_note):
        note = make_note("X")
        with patch.object(CalendarEvent.objects, "bulk_create", side_effect=DatabaseError("disk full")):
            with pytest.raises(PersistenceError):
                schedule_reviews(note)
        assert not CalendarEvent.objects.filter(note=note).exists()

    def test_title_rename_does_not_resync_events(self, make_note):
        note = make_note("Old")
        schedule_reviews(note)
        note.title = "New"
        note.save()
        assert set(CalendarEvent.objects.values_list("title", flat=True)) == {"Review: Old"}

    def test_note_delete_cascades_to_events(self, make_note, user):
        note = make_note("X")
        schedule_reviews(note)
        CalendarEvent.objects.create(user=user, title="Exam", date=date(2024, 5, 1), note=note)
        keeper = CalendarEvent.objects.create(user=user, title="Unrelated", date=date(2024, 5, 2))

        note_id = note.pk
        note.delete()

        assert not CalendarEvent.objects.filter(note_id=note_id).exists()
        assert list(CalendarEvent.objects.all()) == [keeper]
        assert not Note.objects.filter(pk=note_id).exists()

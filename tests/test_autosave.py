"""Tests for debounced note autosave."""

from unittest.mock import patch

import pytest

from notes import autosave
from notes.autosave import Debouncer, NoteAutosaver
from notes.models import Note


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, wait, func):
        self.wait = wait
        self.func = func
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.func()


class FakeTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, wait, func):
        timer = FakeTimer(wait, func)
        self.timers.append(timer)
        return timer

    @property
    def live(self):
        return [t for t in self.timers if not t.cancelled]


class TestDebouncer:
    def test_rapid_calls_coalesce_into_last(self):
        calls = []
        timers = FakeTimerFactory()
        debounced = Debouncer(lambda **kw: calls.append(kw), 1.0, timers)

        debounced(content="a")
        debounced(content="ab")
        debounced(content="abc")

        assert calls == []
        assert len(timers.live) == 1
        timers.live[0].fire()
        assert calls == [{"content": "abc"}]
        assert not debounced.pending

    def test_each_call_rearms_with_same_wait(self):
        timers = FakeTimerFactory()
        debounced = Debouncer(lambda: None, 0.5, timers)

        debounced()
        debounced()

        assert [t.wait for t in timers.timers] == [0.5, 0.5]
        assert [t.cancelled for t in timers.timers] == [True, False]

    def test_flush_fires_immediately_once(self):
        calls = []
        timers = FakeTimerFactory()
        debounced = Debouncer(calls.append, 1.0, timers)

        debounced("x")
        assert debounced.flush() is True
        assert debounced.flush() is False
        timers.timers[0].fire()
        assert calls == ["x"]

    def test_cancel_drops_pending_call(self):
        calls = []
        timers = FakeTimerFactory()
        debounced = Debouncer(calls.append, 1.0, timers)

        debounced("x")
        debounced.cancel()
        timers.timers[0].func()
        assert calls == []

    def test_superseded_timer_that_still_runs_is_ignored(self):
        calls = []
        timers = FakeTimerFactory()
        debounced = Debouncer(lambda **kw: calls.append(kw), 1.0, timers)

        debounced(content="a")
        superseded = timers.timers[0]
        debounced(content="ab")
        # the old timer thread got past cancel() and runs anyway
        superseded.func()

        assert calls == []
        assert debounced.pending
        timers.live[0].fire()
        assert calls == [{"content": "ab"}]

    def test_default_thread_timer_fires_and_closes_connections(self):
        calls = []
        started = []

        def recording_factory(wait, func):
            timer = autosave._thread_timer(wait, func)
            started.append(timer)
            return timer

        with patch("notes.autosave.connections") as connections:
            debounced = Debouncer(calls.append, 0, recording_factory)
            debounced("x")
            started[0].join(timeout=5)

        assert not started[0].is_alive()
        assert started[0].daemon
        assert calls == ["x"]
        connections.close_all.assert_called_once_with()


@pytest.mark.django_db
class TestNoteAutosaver:
    @pytest.fixture
    def timers(self, monkeypatch):
        factory = FakeTimerFactory()
        monkeypatch.setattr(autosave, "autosaver", NoteAutosaver(wait=1.0, timer_factory=factory))
        return factory

    def test_burst_of_edits_writes_last_content_once(self, auth_client, make_note, user, timers):
        note = make_note("Draft", "start")

        for text in ("s", "st", "stu", "study"):
            response = auth_client.post(f"/api/notes/{note.pk}/autosave/", {"content": text}, format="json")
            assert response.status_code == 202

        note.refresh_from_db()
        assert note.content == "start"
        assert autosave.autosaver.is_pending(user.id, note.pk)
        assert len(timers.live) == 1

        timers.live[0].fire()

        note.refresh_from_db()
        assert note.content == "study"
        assert not autosave.autosaver.is_pending(user.id, note.pk)

    def test_title_and_content_edits_merge(self, auth_client, make_note, user, timers):
        note = make_note("Draft")

        auth_client.post(f"/api/notes/{note.pk}/autosave/", {"title": "Final"}, format="json")
        auth_client.post(f"/api/notes/{note.pk}/autosave/", {"content": "body"}, format="json")
        assert autosave.autosaver.flush(user.id, note.pk)

        note.refresh_from_db()
        assert (note.title, note.content) == ("Final", "body")

    def test_pending_write_for_deleted_note_is_skipped(self, auth_client, make_note, user, timers):
        note = make_note("Draft")
        auth_client.post(f"/api/notes/{note.pk}/autosave/", {"content": "late"}, format="json")
        note_id = note.pk
        note.delete()

        timers.live[0].fire()

        assert not Note.objects.filter(pk=note_id).exists()

    def test_empty_payload_rejected(self, auth_client, make_note, timers):
        note = make_note("Draft")
        response = auth_client.post(f"/api/notes/{note.pk}/autosave/", {}, format="json")
        assert response.status_code == 400
        assert timers.timers == []

    def test_cannot_autosave_another_users_note(self, other_client, make_note, timers):
        note = make_note("Draft")
        response = other_client.post(f"/api/notes/{note.pk}/autosave/", {"content": "x"}, format="json")
        assert response.status_code == 404
        assert timers.timers == []

    def test_unknown_fields_refused(self):
        with pytest.raises(ValueError):
            NoteAutosaver(timer_factory=FakeTimerFactory()).schedule(1, 1, tags=["x"])

"""Trailing-edge debounced writes for note edits.

Rapid edits to the same note are merged and written once, after the quiet
period has passed without a new edit.
"""
import logging
import threading
from functools import partial

from django.conf import settings
from django.db import DatabaseError, connections

from .models import Note

logger = logging.getLogger(__name__)

AUTOSAVE_FIELDS = ("title", "content")


def _thread_timer(wait, func):
    def run():
        try:
            func()
        finally:
            connections.close_all()

    timer = threading.Timer(wait, run)
    timer.daemon = True
    return timer


class Debouncer:
    """
    Call ``func`` once, ``wait`` seconds after the last call.

    Each call cancels the pending timer and re-arms it; only the most recent
    arguments reach ``func``. ``timer_factory(wait, callback)`` must return an
    object with ``start()`` and ``cancel()``, like ``threading.Timer``.
    """

    def __init__(self, func, wait, timer_factory=None):
        self.func = func
        self.wait = wait
        self._timer_factory = timer_factory or _thread_timer
        self._lock = threading.Lock()
        self._timer = None
        self._token = None
        self._args = ()
        self._kwargs = {}

    def __call__(self, *args, **kwargs):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            self._kwargs = kwargs
            # each arming gets its own token; a stale timer that still runs is ignored
            token = object()
            self._token = token
            self._timer = self._timer_factory(self.wait, partial(self._fire, token))
            self._timer.start()

    @property
    def pending(self):
        return self._timer is not None

    def _fire(self, token):
        with self._lock:
            if self._timer is None or self._token is not token:
                return
            self._timer = None
            self._token = None
            args, kwargs = self._args, self._kwargs
        self.func(*args, **kwargs)

    def flush(self):
        """Run the pending call now. Returns False when nothing was pending."""
        with self._lock:
            timer, token = self._timer, self._token
        if timer is None:
            return False
        timer.cancel()
        self._fire(token)
        return True

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._token = None


class NoteAutosaver:
    """One debouncer per (user, note); edits inside a window are merged."""

    def __init__(self, wait=None, timer_factory=None):
        self._wait = wait
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._debouncers = {}
        self._pending = {}

    @property
    def wait(self):
        if self._wait is None:
            return settings.NOTE_AUTOSAVE_DELAY
        return self._wait

    def schedule(self, user_id, note_id, **changes):
        unknown = set(changes) - set(AUTOSAVE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot autosave fields: {', '.join(sorted(unknown))}")
        key = (user_id, note_id)
        with self._lock:
            merged = {**self._pending.get(key, {}), **changes}
            self._pending[key] = merged
            debouncer = self._debouncers.get(key)
            if debouncer is None:
                debouncer = Debouncer(partial(self._write, user_id, note_id), self.wait, self._timer_factory)
                self._debouncers[key] = debouncer
        debouncer(**merged)

    def is_pending(self, user_id, note_id):
        debouncer = self._debouncers.get((user_id, note_id))
        return bool(debouncer and debouncer.pending)

    def flush(self, user_id, note_id):
        debouncer = self._debouncers.get((user_id, note_id))
        return bool(debouncer and debouncer.flush())

    def flush_all(self):
        for debouncer in list(self._debouncers.values()):
            debouncer.flush()

    def _write(self, user_id, note_id, **changes):
        key = (user_id, note_id)
        with self._lock:
            self._pending.pop(key, None)
            self._debouncers.pop(key, None)
        try:
            note = Note.objects.filter(pk=note_id, user_id=user_id).first()
            if note is None:
                logger.debug("Skipping autosave for note %s: it no longer exists", note_id)
                return
            for field, value in changes.items():
                setattr(note, field, value)
            note.save(update_fields=list(changes))
        except DatabaseError:
            logger.exception("Autosave failed for note %s", note_id)
            return
        logger.debug("Autosaved note %s (%s)", note_id, ", ".join(changes))


autosaver = NoteAutosaver()

from django.contrib.auth.models import User
from django.db import models

from notes.models import Note

NORMAL_EVENT_COLOR = "#3b82f6"
REVIEW_EVENT_COLOR = "#f59e0b"


class CalendarEvent(models.Model):
    KIND_NORMAL = "normal"
    KIND_REVIEW = "review"
    KIND_CHOICES = (
        (KIND_NORMAL, "Normal"),
        (KIND_REVIEW, "Review"),
    )

    user = models.ForeignKey(User, on_delete=models.CASCADE)
    title = models.CharField(max_length=255)
    date = models.DateField(db_index=True)
    note = models.ForeignKey(Note, null=True, blank=True, on_delete=models.CASCADE, related_name="events")
    kind = models.CharField(max_length=12, choices=KIND_CHOICES, default=KIND_NORMAL)
    color = models.CharField(max_length=32, default=NORMAL_EVENT_COLOR)

    class Meta:
        ordering = ["date", "id"]
        indexes = [
            models.Index(fields=["user", "date"], name="calendar_event_user_date_idx"),
        ]

    @property
    def is_review(self):
        return self.kind == self.KIND_REVIEW

    def __str__(self):
        return f"{self.date} {self.title}"

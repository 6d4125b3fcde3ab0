from django.contrib.auth.models import User
from django.db import models

from core import clock
from notes.models import Note
from tags.models import Tag


class Link(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE)
    url = models.URLField(max_length=2000)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    tags = models.ManyToManyField(Tag, blank=True, related_name="links")
    note = models.ForeignKey(Note, null=True, blank=True, on_delete=models.SET_NULL, related_name="links")
    created_at = models.DateTimeField(editable=False)

    class Meta:
        ordering = ["-created_at", "-id"]

    def save(self, *args, **kwargs):
        if self.created_at is None:
            self.created_at = clock.now()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title

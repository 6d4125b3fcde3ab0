from django.contrib.auth.models import User
from django.db import models
from django.db.models.functions import Lower

DEFAULT_COLORS = [
    "#3b82f6",
    "#f59e0b",
    "#2563eb",
    "#9333ea",
    "#db2777",
    "#059669",
    "#d97706",
]


def next_color(user):
    """Rotate through the palette by how many tags the user already has."""
    return DEFAULT_COLORS[Tag.objects.filter(user=user).count() % len(DEFAULT_COLORS)]


class Tag(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE)
    name = models.CharField(max_length=50)
    color = models.CharField(max_length=32, blank=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(Lower("name"), "user", name="uniq_tag_name_per_user"),
        ]

    def __str__(self):
        return self.name

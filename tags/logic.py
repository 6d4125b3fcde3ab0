from django.db.models import Count, F


def with_usage_counts(queryset):
    """Annotate each tag with ``usage_count`` = tagged notes + tagged links."""
    return queryset.annotate(
        note_count=Count("notes", distinct=True),
        link_count=Count("links", distinct=True),
    ).annotate(usage_count=F("note_count") + F("link_count"))


def usage_count(tag):
    return tag.notes.count() + tag.links.count()

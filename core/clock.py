from django.utils import timezone


def now():
    """Current aware datetime. Patch ``core.clock.now`` to freeze time in tests."""
    return timezone.now()


def today():
    return timezone.localtime(now()).date()

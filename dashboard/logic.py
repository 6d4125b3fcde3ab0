from datetime import timedelta


def week_bounds(day):
    """Monday..Sunday of the week containing ``day``."""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)

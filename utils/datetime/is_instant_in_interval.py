from datetime import datetime, timezone


def is_instant_in_interval(instant: datetime, start: datetime, end: datetime) -> bool:
    """
    Check if an aware instant lies in the half-open interval [start, end).

    All three values are compared in UTC so that intervals expressed in
    different zones (or either side of a DST change) compare correctly.
    """
    instant_utc = instant.astimezone(timezone.utc)
    return start.astimezone(timezone.utc) <= instant_utc < end.astimezone(timezone.utc)

from datetime import date, datetime, time, timedelta
from utils.datetime.get_zone import get_zone


def get_day_bounds(day: date, timezone: str) -> tuple[datetime, datetime]:
    """
    Get the start and the (exclusive) end of a calendar day in a timezone.

    Args:
        day: The calendar day
        timezone: IANA timezone name

    Returns:
        (start, end): local midnight of the day and of the following day
    """
    zone = get_zone(timezone)
    start = datetime.combine(day, time(0, 0), tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time(0, 0), tzinfo=zone)
    return start, end

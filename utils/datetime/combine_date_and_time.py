from datetime import date, datetime, time
from utils.datetime.get_zone import get_zone


def combine_date_and_time(day: date, time_of_day: time, timezone: str) -> datetime:
    """
    Convert a date and a wall-clock time into an aware datetime in the given
    timezone.
    """
    return datetime.combine(
        day,
        time_of_day.replace(second=0, microsecond=0),
        tzinfo=get_zone(timezone),
    )

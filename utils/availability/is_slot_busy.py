from datetime import datetime, time
from zoneinfo import ZoneInfo
from models.calendar.calendar_event import CalendarEvent
from utils.datetime import is_instant_in_interval


def is_slot_busy(
    slot_time: time,
    busy_events: list[CalendarEvent],
    zone: ZoneInfo
) -> bool:
    """
    Check whether a candidate time of day collides with any busy interval.

    The candidate is placed on the busy event's own local calendar day before
    comparing, so it does not matter which availability window produced it.
    """
    for busy_event in busy_events:
        busy_day = busy_event.start.astimezone(zone).date()
        slot_instant = datetime.combine(busy_day, slot_time, tzinfo=zone)

        if is_instant_in_interval(slot_instant, busy_event.start, busy_event.end):
            return True

    return False

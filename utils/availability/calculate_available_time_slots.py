import logging
from typing import Iterable
from models.calendar.calendar_event import CalendarEvent
from utils.availability.generate_window_slot_times import generate_window_slot_times
from utils.availability.is_slot_busy import is_slot_busy
from utils.datetime import SlotFormat, format_slot_time, get_zone

logger = logging.getLogger(__name__)


def calculate_available_time_slots(
    events: Iterable[CalendarEvent],
    timezone: str,
    slot_format: SlotFormat = "24h"
) -> list[str]:
    """
    Turn one resource's calendar events for a day into bookable slots.

    Events labelled "Available" open availability windows; every other event
    is busy. Each window is expanded into hourly start times, the candidates
    are unioned, and any candidate falling inside a busy interval is dropped.

    Args:
        events: Calendar events for the day
        timezone: IANA timezone used to align and format slots
        slot_format: "24h" or "12h" slot labels

    Returns:
        Slot labels, ascending by time of day, without duplicates
    """
    zone = get_zone(timezone)

    candidate_times = set()
    busy_events = []
    for event in events:
        if event.is_availability_window:
            candidate_times.update(
                generate_window_slot_times(event.start, event.end, zone))
        else:
            busy_events.append(event)

    available_times = [
        slot_time for slot_time in candidate_times
        if not is_slot_busy(slot_time, busy_events, zone)
    ]

    logger.debug(
        "%d candidate slot(s), %d busy interval(s), %d available",
        len(candidate_times), len(busy_events), len(available_times))

    return [
        format_slot_time(slot_time, slot_format)
        for slot_time in sorted(available_times)
    ]

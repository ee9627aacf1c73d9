import logging
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo
from models.calendar.calendar_event import CalendarEvent
from utils.datetime import get_zone

logger = logging.getLogger(__name__)


def parse_event_time(value: dict[str, Any] | None, zone: ZoneInfo) -> datetime:
    """
    Parse a Google Calendar start/end object into an aware datetime.

    Timed events carry "dateTime" (RFC 3339); all-day events carry "date",
    which is read as local midnight. Naive timestamps are read in `zone`.
    """
    if not value:
        raise ValueError("missing time")

    if value.get("dateTime"):
        raw = value["dateTime"]
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        parsed = datetime.fromisoformat(raw)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=zone)
        return parsed

    if value.get("date"):
        return datetime.combine(
            date.fromisoformat(value["date"]), time(0, 0), tzinfo=zone)

    raise ValueError("neither dateTime nor date present")


def parse_calendar_events(
    items: list[dict[str, Any]],
    timezone: str
) -> list[CalendarEvent]:
    """
    Map Google Calendar event items onto CalendarEvent objects.

    Cancelled items are ignored. Items that are not objects or whose times
    cannot be parsed are skipped with a warning so the rest of the day is still usable.

    Args:
        items: The "items" array of an events.list response
        timezone: Calendar timezone, used for all-day and naive times

    Returns:
        Parsed events, in input order
    """
    zone = get_zone(timezone)
    events = []

    for item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping calendar item that is not an object: %r", item)
            continue

        if item.get("status") == "cancelled":
            continue

        label = item.get("summary") or ""
        try:
            start = parse_event_time(item.get("start"), zone)
            end = parse_event_time(item.get("end"), zone)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(
                "Skipping calendar event %r (%s): %s",
                item.get("id"), label, e)
            continue

        events.append(CalendarEvent(start=start, end=end, label=label))

    return events

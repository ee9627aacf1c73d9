from datetime import datetime
from typing import Any


def build_calendar_event_body(
    summary: str,
    description: str,
    start: datetime,
    end: datetime,
    timezone: str
) -> dict[str, Any]:
    """
    Build a Google Calendar event resource for a confirmed booking.

    Start and end are sent as RFC 3339 timestamps carrying their own offset,
    together with the IANA zone name, so Google stores the wall-clock time the
    customer picked.
    """
    return {
        "summary": summary,
        "description": description,
        "start": {"dateTime": start.isoformat(), "timeZone": timezone},
        "end": {"dateTime": end.isoformat(), "timeZone": timezone},
    }

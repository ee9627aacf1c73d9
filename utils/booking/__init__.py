from utils.booking.build_calendar_event_body import build_calendar_event_body

__all__ = [
    "build_calendar_event_body",
]

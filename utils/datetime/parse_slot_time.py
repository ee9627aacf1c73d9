from datetime import datetime, time


SLOT_TIME_FORMATS = ["%H:%M", "%I %p", "%I:%M %p", "%I%p", "%I:%M%p"]


def parse_slot_time(slot: str) -> time:
    """
    Parse a slot label in either 24-hour ("09:15") or 12-hour ("9 AM",
    "9:15 PM") form back into a time of day.
    """
    text = slot.strip().upper()
    for slot_time_format in SLOT_TIME_FORMATS:
        try:
            return datetime.strptime(text, slot_time_format).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised slot time: {slot!r}")

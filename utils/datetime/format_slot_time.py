from datetime import time
from typing import Literal


SlotFormat = Literal["24h", "12h"]


def format_slot_time(slot_time: time, slot_format: SlotFormat = "24h") -> str:
    """
    Format a time of day as a slot label.

    Args:
        slot_time: The time of day to format
        slot_format: "24h" for HH:MM, "12h" for "9 AM" / "9:15 AM"

    Returns:
        The slot label
    """
    if slot_format == "24h":
        return slot_time.strftime("%H:%M")
    if slot_format != "12h":
        raise ValueError("slot_format must be '24h' or '12h'")

    hour = slot_time.strftime("%I").lstrip("0")
    period = slot_time.strftime("%p")
    if slot_time.minute == 0:
        return f"{hour} {period}"
    return f"{hour}:{slot_time.minute:02d} {period}"

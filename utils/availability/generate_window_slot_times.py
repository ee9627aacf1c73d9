from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo


SLOT_STEP = timedelta(hours=1)


def generate_window_slot_times(
    start: datetime,
    end: datetime,
    zone: ZoneInfo
) -> list[time]:
    """
    Generate the hourly start times inside an availability window.

    Slots step by one hour from the window's own start, so a window opening
    at 09:15 yields 09:15, 10:15, ... The window end is exclusive. A step that
    lands in a daylight-saving gap is labelled with the real local time it
    resolves to, and repeated labels are kept once.

    Args:
        start: Window start (aware)
        end: Window end (aware)
        zone: Timezone whose wall clock the slots are expressed in

    Returns:
        List of local times of day, in generation order
    """
    end_utc = end.astimezone(timezone.utc)
    current_slot = start.astimezone(zone)

    slot_times = []
    while current_slot.astimezone(timezone.utc) < end_utc:
        local_slot = current_slot.astimezone(timezone.utc).astimezone(zone)
        slot_time = local_slot.time().replace(second=0, microsecond=0)
        if slot_time not in slot_times:
            slot_times.append(slot_time)
        current_slot = current_slot + SLOT_STEP

    return slot_times

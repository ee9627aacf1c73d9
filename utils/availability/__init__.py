from utils.availability.calculate_available_time_slots import calculate_available_time_slots
from utils.availability.generate_window_slot_times import generate_window_slot_times
from utils.availability.is_slot_busy import is_slot_busy
from utils.availability.parse_calendar_events import parse_calendar_events

__all__ = [
    "calculate_available_time_slots",
    "generate_window_slot_times",
    "is_slot_busy",
    "parse_calendar_events",
]

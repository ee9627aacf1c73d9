from utils.datetime.combine_date_and_time import combine_date_and_time
from utils.datetime.format_slot_time import SlotFormat, format_slot_time
from utils.datetime.get_day_bounds import get_day_bounds
from utils.datetime.get_zone import get_zone
from utils.datetime.is_instant_in_interval import is_instant_in_interval
from utils.datetime.parse_slot_time import parse_slot_time

__all__ = [
    "SlotFormat",
    "combine_date_and_time",
    "format_slot_time",
    "get_day_bounds",
    "get_zone",
    "is_instant_in_interval",
    "parse_slot_time",
]

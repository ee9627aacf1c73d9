from utils.common.format_duration import format_duration
from utils.common.format_long_date import format_long_date
from utils.common.format_price import format_price

__all__ = [
    "format_duration",
    "format_long_date",
    "format_price",
]

from exceptions.booking_errors import (
    ArtistCalendarNotFoundError,
    BookingError,
    CalendarFetchError,
    CalendarInsertError,
    CmsError,
    EmailDeliveryError,
    ServiceNotFoundError,
)

__all__ = [
    "ArtistCalendarNotFoundError",
    "BookingError",
    "CalendarFetchError",
    "CalendarInsertError",
    "CmsError",
    "EmailDeliveryError",
    "ServiceNotFoundError",
]

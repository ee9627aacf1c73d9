class BookingError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CalendarFetchError(BookingError):
    pass


class CalendarInsertError(BookingError):
    pass


class CmsError(BookingError):
    pass


class EmailDeliveryError(BookingError):
    pass


class ArtistCalendarNotFoundError(BookingError):
    def __init__(self, message: str = "Artist calendar ID not found"):
        super().__init__(message)


class ServiceNotFoundError(BookingError):
    def __init__(self, message: str = "Service not found"):
        super().__init__(message)

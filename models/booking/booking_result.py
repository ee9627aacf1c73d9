from datetime import date
from pydantic import BaseModel


class BookingResult(BaseModel):
    success: bool
    event_id: str | None
    artist_name: str
    service_title: str
    date: date
    time: str
    price: float
    first_name: str
    last_name: str
    confirmation_sent: bool

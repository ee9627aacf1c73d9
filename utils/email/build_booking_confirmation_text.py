from datetime import date, time
from config import Settings
from models.cms.artist import Artist
from models.cms.service import Service
from utils.common import format_duration, format_long_date, format_price
from utils.datetime import format_slot_time


def build_booking_confirmation_text(
    first_name: str,
    artist: Artist,
    service: Service,
    day: date,
    start_time: time,
    duration_minutes: int,
    notes: str | None,
    settings: Settings
) -> str:
    """
    Build the plain-text body of the booking confirmation email.

    Args:
        first_name: Customer first name
        artist: The booked artist
        service: The booked service
        day: Booking date
        start_time: Local start time of the booking
        duration_minutes: Length of the booking
        notes: Customer notes, if any
        settings: Business details

    Returns:
        The email body
    """
    lines = [
        f"Thank you for your booking, {first_name}!",
        "",
        "Here are your booking details:",
        f"Artist: {artist.name}",
        f"Service: {service.title}",
        f"Date: {format_long_date(day)}",
        f"Time: {format_slot_time(start_time, '12h')}",
        f"Duration: {format_duration(duration_minutes)}",
        f"Price: {format_price(service.price)}",
    ]

    if notes:
        lines += ["", "Your notes:", notes]

    lines += [
        "",
        "If you need to make changes, please reach out to us at "
        f"{settings.send_phone} or {settings.send_email}.",
    ]

    if settings.website_url:
        lines.append(f"{settings.website_url}/contact")

    return "\n".join(lines)

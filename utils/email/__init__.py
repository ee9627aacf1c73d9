from utils.email.build_booking_confirmation_text import build_booking_confirmation_text
from utils.email.build_contact_message_text import build_contact_message_text

__all__ = [
    "build_booking_confirmation_text",
    "build_contact_message_text",
]

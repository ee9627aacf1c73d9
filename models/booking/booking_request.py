import re
from datetime import date
from pydantic import BaseModel, field_validator
from utils.datetime import parse_slot_time


EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"^[0-9()\-\s+]+$")


class BookingRequest(BaseModel):
    artist_id: str
    service_id: str
    date: date
    time: str  # A slot as returned by /calendar/time-slots
    first_name: str
    last_name: str
    email: str
    phone: str
    notes: str | None = None

    @field_validator("artist_id", "service_id")
    @classmethod
    def check_required_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Missing required fields")
        return value

    @field_validator("time")
    @classmethod
    def check_time(cls, value: str) -> str:
        try:
            parse_slot_time(value)
        except ValueError:
            raise ValueError("Please select a valid time")
        return value.strip()

    @field_validator("first_name")
    @classmethod
    def check_first_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("First name is required")
        return value.strip()

    @field_validator("last_name")
    @classmethod
    def check_last_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Last name is required")
        return value.strip()

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.search(value):
            raise ValueError("Please enter a valid email address")
        return value.strip()

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Phone number is required")
        if not PHONE_PATTERN.match(value):
            raise ValueError("Please enter a valid phone number")
        return value.strip()

from pydantic import BaseModel, field_validator
from models.booking.booking_request import EMAIL_PATTERN, PHONE_PATTERN


class ContactMessage(BaseModel):
    name: str
    email: str
    phone: str
    message: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
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

    @field_validator("message")
    @classmethod
    def check_message(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message is required")
        return value.strip()

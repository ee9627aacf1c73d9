import json
import os
from functools import lru_cache
from pydantic import BaseModel, field_validator
from utils.datetime import SlotFormat, get_zone


class Settings(BaseModel):
    google_api_key: str | None = None
    google_service_account: dict = {}
    graphql_url: str | None = None
    sendgrid_api_key: str | None = None
    send_email: str = "contact@bellaartistry.com"
    send_phone: str = "+1234567890"
    business_name: str = "Bella Artistry"
    business_address: str = "Surrey, BC, Canada"
    website_url: str = ""
    calendar_timezone: str = "America/Vancouver"
    slot_format: SlotFormat = "24h"
    log_level: str = "INFO"

    @field_validator("calendar_timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        get_zone(value)
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Build the settings from environment variables (loaded from .env by
    main.py at startup).
    """
    service_account = os.getenv("GOOGLE_SERVICE_ACCOUNT") or "{}"

    values = {
        "google_api_key": os.getenv("GOOGLE_API_KEY"),
        "google_service_account": json.loads(service_account),
        "graphql_url": os.getenv("GRAPHQL_URL"),
        "sendgrid_api_key": os.getenv("SENDGRID_API_KEY"),
        "send_email": os.getenv("SEND_EMAIL"),
        "send_phone": os.getenv("SEND_PHONE"),
        "business_name": os.getenv("BUSINESS_NAME"),
        "business_address": os.getenv("BUSINESS_ADDRESS"),
        "website_url": os.getenv("WEBSITE_URL"),
        "calendar_timezone": os.getenv("CALENDAR_TIMEZONE"),
        "slot_format": os.getenv("SLOT_FORMAT"),
        "log_level": os.getenv("LOG_LEVEL"),
    }

    # Unset variables fall back to the model defaults
    return Settings(**{key: value for key, value in values.items() if value is not None})

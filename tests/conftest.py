import pytest
from config import Settings
from models.cms.artist import Artist
from models.cms.service import Service


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        send_email="studio@example.com",
        send_phone="+1 604 555 0100",
        website_url="https://studio.example.com",
        calendar_timezone="America/Vancouver",
        slot_format="24h"
    )


@pytest.fixture
def artist():
    return Artist(id="artist-1", name="Bella", calendar_id="bella@group.calendar.google.com")


@pytest.fixture
def service():
    return Service(id="service-1", title="Bridal Makeup", slug="bridal-makeup", price=120.0, duration=90)

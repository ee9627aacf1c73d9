from datetime import date, datetime
from zoneinfo import ZoneInfo
import pytest
from exceptions import CalendarFetchError
from models.calendar.calendar_event import CalendarEvent
from services.availability_service import AvailabilityService
from tests.fakes import FakeCalendarClient


ZONE = ZoneInfo("America/Vancouver")

EVENTS = [
    CalendarEvent(
        start=datetime(2025, 1, 15, 9, 0, tzinfo=ZONE),
        end=datetime(2025, 1, 15, 12, 0, tzinfo=ZONE),
        label="Available"
    ),
    CalendarEvent(
        start=datetime(2025, 1, 15, 10, 0, tzinfo=ZONE),
        end=datetime(2025, 1, 15, 11, 0, tzinfo=ZONE),
        label="Jane Doe - Bridal Makeup"
    ),
]


@pytest.mark.anyio
async def test_time_slots_for_day(settings):
    # Arrange
    calendar_client = FakeCalendarClient(events=EVENTS)
    availability_service = AvailabilityService(calendar_client, settings)

    # Act
    time_slots = await availability_service.get_time_slots("bella", date(2025, 1, 15))

    # Assert
    assert time_slots == ["09:00", "11:00"]
    assert calendar_client.fetched == [("bella", date(2025, 1, 15), "America/Vancouver")]


@pytest.mark.anyio
async def test_format_override(settings):
    # Arrange
    availability_service = AvailabilityService(FakeCalendarClient(events=EVENTS), settings)

    # Act
    time_slots = await availability_service.get_time_slots("bella", date(2025, 1, 15), "12h")

    # Assert
    assert time_slots == ["9 AM", "11 AM"]


@pytest.mark.anyio
async def test_fetch_failure_means_no_availability(settings):
    # Arrange
    calendar_client = FakeCalendarClient(fetch_error=CalendarFetchError("Not Found"))
    availability_service = AvailabilityService(calendar_client, settings)

    # Act
    time_slots = await availability_service.get_time_slots("bella", date(2025, 1, 15))

    # Assert
    assert time_slots == []

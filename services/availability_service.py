import logging
from datetime import date
from config import Settings
from exceptions import CalendarFetchError
from services.google_calendar_client import GoogleCalendarClient
from utils.availability import calculate_available_time_slots
from utils.datetime import SlotFormat

logger = logging.getLogger(__name__)


class AvailabilityService:

    def __init__(self, calendar_client: GoogleCalendarClient, settings: Settings) -> None:
        self.calendar_client = calendar_client
        self.settings = settings

    async def get_time_slots(
        self,
        calendar_id: str,
        day: date,
        slot_format: SlotFormat | None = None
    ) -> list[str]:
        """
        Get the bookable slots of one artist calendar for a day.

        A failed calendar fetch is logged and reported as no availability.
        """
        timezone = self.settings.calendar_timezone

        try:
            events = await self.calendar_client.fetch_events(calendar_id, day, timezone)
        except CalendarFetchError as e:
            logger.error("Error fetching events for %s on %s: %s", calendar_id, day, e.message)
            return []

        return calculate_available_time_slots(
            events, timezone, slot_format or self.settings.slot_format)

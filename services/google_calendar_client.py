"""
Google Calendar client.

Events are read over the public REST API with an API key and written with
the Google API client library using service-account credentials.
"""
import logging
from datetime import date
from typing import Any
from urllib.parse import quote

import httpx
import httplib2
from fastapi.concurrency import run_in_threadpool
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from exceptions import CalendarFetchError, CalendarInsertError
from models.calendar.calendar_event import CalendarEvent
from utils.availability import parse_calendar_events
from utils.datetime import get_day_bounds

logger = logging.getLogger(__name__)

GOOGLE_CALENDAR_API = "https://www.googleapis.com/calendar/v3"
CALENDAR_SCOPES = ["https://www.googleapis.com/auth/calendar"]


class GoogleCalendarClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str | None,
        service_account_info: dict[str, Any] | None = None,
        calendar_resource: Any = None
    ) -> None:
        self.http_client = http_client
        self.api_key = api_key
        self.service_account_info = service_account_info or {}
        self._calendar_resource = calendar_resource

    async def fetch_events(
        self,
        calendar_id: str,
        day: date,
        timezone: str
    ) -> list[CalendarEvent]:
        """
        List the events of one calendar that intersect a local day.

        Raises:
            CalendarFetchError: missing API key, network failure or an error
                response from Google
        """
        if not self.api_key:
            raise CalendarFetchError("Missing Google API Key")

        time_min, time_max = get_day_bounds(day, timezone)
        url = f"{GOOGLE_CALENDAR_API}/calendars/{quote(calendar_id, safe='')}/events"
        params = {
            "timeMin": time_min.isoformat(),
            "timeMax": time_max.isoformat(),
            "singleEvents": "true",
            "orderBy": "startTime",
            "timeZone": timezone,
            "key": self.api_key,
        }

        try:
            response = await self.http_client.get(url, params=params)
        except httpx.HTTPError as e:
            raise CalendarFetchError(f"Failed to fetch events: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_error:
            message = (data.get("error") or {}).get("message") or "Failed to fetch events"
            raise CalendarFetchError(message)

        items = data.get("items") or []
        if not isinstance(items, list):
            logger.warning("Unexpected events payload for %s: %r", calendar_id, items)
            items = []
        logger.info("Fetched %d event(s) for %s on %s", len(items), calendar_id, day)

        return parse_calendar_events(items, timezone)

    def _get_calendar_resource(self) -> Any:
        if self._calendar_resource is None:
            if not self.service_account_info:
                raise CalendarInsertError("Missing Google service account")

            credentials = service_account.Credentials.from_service_account_info(
                self.service_account_info, scopes=CALENDAR_SCOPES)
            self._calendar_resource = build(
                "calendar", "v3", credentials=credentials, cache_discovery=False)

        return self._calendar_resource

    def _insert_event_sync(self, calendar_id: str, event_body: dict[str, Any]) -> dict[str, Any]:
        calendar = self._get_calendar_resource()
        return calendar.events().insert(calendarId=calendar_id, body=event_body).execute()

    async def insert_event(self, calendar_id: str, event_body: dict[str, Any]) -> dict[str, Any]:
        """
        Insert an event into a calendar.

        The client library blocks, so the call runs in the threadpool.

        Raises:
            CalendarInsertError: missing credentials or a failed insert
        """
        try:
            return await run_in_threadpool(self._insert_event_sync, calendar_id, event_body)
        except HttpError as e:
            raise CalendarInsertError(f"Failed to create event: {e}") from e
        except (GoogleAuthError, ValueError) as e:
            raise CalendarInsertError(f"Invalid Google credentials: {e}") from e
        except (httplib2.HttpLib2Error, OSError) as e:
            raise CalendarInsertError(f"Failed to reach Google Calendar: {e}") from e

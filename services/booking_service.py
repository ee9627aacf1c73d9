import logging
from datetime import time, timedelta
from config import Settings
from exceptions import ArtistCalendarNotFoundError, EmailDeliveryError, ServiceNotFoundError
from models.booking.booking_request import BookingRequest
from models.booking.booking_result import BookingResult
from models.cms.artist import Artist
from models.cms.service import Service
from services.cms_client import CmsClient
from services.google_calendar_client import GoogleCalendarClient
from services.sendgrid_client import SendGridClient
from utils.booking import build_calendar_event_body
from utils.datetime import combine_date_and_time, format_slot_time, parse_slot_time
from utils.email import build_booking_confirmation_text

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 60


class BookingService:

    def __init__(
        self,
        cms_client: CmsClient,
        calendar_client: GoogleCalendarClient,
        mailer: SendGridClient,
        settings: Settings
    ) -> None:
        self.cms_client = cms_client
        self.calendar_client = calendar_client
        self.mailer = mailer
        self.settings = settings

    async def confirm(self, request: BookingRequest) -> BookingResult:
        """
        Confirm a booking: write it to the artist's calendar, then email the
        customer.

        Raises:
            ArtistCalendarNotFoundError: unknown artist or artist without a calendar
            ServiceNotFoundError: unknown service
            CalendarInsertError: the calendar rejected the event
        """
        artist = await self.cms_client.get_artist_by_id(request.artist_id)
        if not artist or not artist.calendar_id:
            raise ArtistCalendarNotFoundError()

        service = await self.cms_client.get_service_by_id(request.service_id)
        if not service:
            raise ServiceNotFoundError()

        timezone = self.settings.calendar_timezone
        duration = service.duration or DEFAULT_DURATION_MINUTES
        start_time = parse_slot_time(request.time)
        start = combine_date_and_time(request.date, start_time, timezone)
        end = start + timedelta(minutes=duration)

        event_body = build_calendar_event_body(
            summary=f"{request.first_name} {request.last_name} - {service.title}",
            description=request.notes or "No additional notes.",
            start=start,
            end=end,
            timezone=timezone
        )

        logger.info(
            "Creating calendar event for %s with %s at %s",
            service.title, artist.name, start.isoformat())
        created_event = await self.calendar_client.insert_event(artist.calendar_id, event_body)

        confirmation_sent = await self._send_confirmation(
            request, artist, service, start_time, duration)

        return BookingResult(
            success=True,
            event_id=created_event.get("id"),
            artist_name=artist.name,
            service_title=service.title,
            date=request.date,
            time=format_slot_time(start_time, self.settings.slot_format),
            price=service.price,
            first_name=request.first_name,
            last_name=request.last_name,
            confirmation_sent=confirmation_sent,
        )

    async def _send_confirmation(
        self,
        request: BookingRequest,
        artist: Artist,
        service: Service,
        start_time: time,
        duration: int
    ) -> bool:
        # Mail failures leave the calendar event in place
        text = build_booking_confirmation_text(
            first_name=request.first_name,
            artist=artist,
            service=service,
            day=request.date,
            start_time=start_time,
            duration_minutes=duration,
            notes=request.notes,
            settings=self.settings
        )

        try:
            await self.mailer.send(
                to_email=request.email,
                subject=f"Booking Confirmation - {service.title}",
                text=text
            )
        except EmailDeliveryError as e:
            logger.error("Error sending confirmation email to %s: %s", request.email, e.message)
            return False

        return True

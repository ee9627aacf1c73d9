from collections.abc import AsyncIterator

import httpx
from fastapi import Depends

from config import Settings, get_settings
from services.availability_service import AvailabilityService
from services.booking_service import BookingService
from services.cms_client import CmsClient
from services.contact_service import ContactService
from services.google_calendar_client import GoogleCalendarClient
from services.sendgrid_client import SendGridClient

HTTP_TIMEOUT_SECONDS = 10


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
        yield client


def get_calendar_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings)
) -> GoogleCalendarClient:
    return GoogleCalendarClient(
        http_client,
        api_key=settings.google_api_key,
        service_account_info=settings.google_service_account
    )


def get_cms_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings)
) -> CmsClient:
    return CmsClient(http_client, settings.graphql_url)


def get_mailer(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings)
) -> SendGridClient:
    return SendGridClient(
        http_client,
        api_key=settings.sendgrid_api_key,
        sender_email=settings.send_email,
        sender_name=settings.business_name
    )


def get_availability_service(
    calendar_client: GoogleCalendarClient = Depends(get_calendar_client),
    settings: Settings = Depends(get_settings)
) -> AvailabilityService:
    return AvailabilityService(calendar_client, settings)


def get_booking_service(
    cms_client: CmsClient = Depends(get_cms_client),
    calendar_client: GoogleCalendarClient = Depends(get_calendar_client),
    mailer: SendGridClient = Depends(get_mailer),
    settings: Settings = Depends(get_settings)
) -> BookingService:
    return BookingService(cms_client, calendar_client, mailer, settings)


def get_contact_service(
    mailer: SendGridClient = Depends(get_mailer),
    settings: Settings = Depends(get_settings)
) -> ContactService:
    return ContactService(mailer, settings)

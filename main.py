import logging
import os
from datetime import date
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query
from exceptions import (
    ArtistCalendarNotFoundError,
    CalendarInsertError,
    EmailDeliveryError,
    ServiceNotFoundError,
)
from models.booking.booking_request import BookingRequest
from models.booking.booking_result import BookingResult
from models.calendar.time_slots_response import TimeSlotsResponse
from models.cms.artist import Artist
from models.cms.service import Service
from models.contact.contact_message import ContactMessage
from services.availability_service import AvailabilityService
from services.booking_service import BookingService
from services.cms_client import CmsClient
from services.contact_service import ContactService
from utils.datetime import SlotFormat
from dependencies import (
    get_availability_service,
    get_booking_service,
    get_cms_client,
    get_contact_service,
)


# Load environment variables
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="Studio Booking API")


@app.get("/")
async def root():
    return {
        "message": (
            "Welcome to the Studio Booking API! "
            "Swagger UI documentation is available at /docs"
        )
    }


@app.get("/calendar/time-slots", response_model=TimeSlotsResponse)
async def get_time_slots(
    calendar_id: str = Query(..., min_length=1),
    day: date = Query(..., alias="date"),
    slot_format: SlotFormat | None = Query(None, alias="format"),
    availability_service: AvailabilityService = Depends(get_availability_service)
):
    time_slots = await availability_service.get_time_slots(calendar_id, day, slot_format)
    return TimeSlotsResponse(time_slots=time_slots)


@app.get("/services", response_model=list[Service])
async def get_services(cms_client: CmsClient = Depends(get_cms_client)):
    return await cms_client.get_services()


@app.get("/services/{service_id}", response_model=Service)
async def get_service(service_id: str, cms_client: CmsClient = Depends(get_cms_client)):
    service = await cms_client.get_service_by_id(service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return service


@app.get("/artists", response_model=list[Artist])
async def get_artists(cms_client: CmsClient = Depends(get_cms_client)):
    return await cms_client.get_artists()


@app.get("/artists/{artist_id}", response_model=Artist)
async def get_artist(artist_id: str, cms_client: CmsClient = Depends(get_cms_client)):
    artist = await cms_client.get_artist_by_id(artist_id)
    if not artist:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist


@app.post("/bookings", response_model=BookingResult)
async def create_booking(
    booking: BookingRequest,
    booking_service: BookingService = Depends(get_booking_service)
):
    try:
        return await booking_service.confirm(booking)
    except (ArtistCalendarNotFoundError, ServiceNotFoundError) as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CalendarInsertError as e:
        logger.error("Error creating Google Calendar event: %s", e.message)
        raise HTTPException(status_code=500, detail="Failed to create event")


@app.post("/contact")
async def send_contact_message(
    message: ContactMessage,
    contact_service: ContactService = Depends(get_contact_service)
):
    try:
        await contact_service.send_message(message)
    except EmailDeliveryError as e:
        logger.error("Error sending contact form email: %s", e.message)
        raise HTTPException(status_code=500, detail=e.message)

    return {"message": "Contact form email sent!"}

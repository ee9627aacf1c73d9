import logging
from config import Settings
from models.contact.contact_message import ContactMessage
from services.sendgrid_client import SendGridClient
from utils.email import build_contact_message_text

logger = logging.getLogger(__name__)


class ContactService:

    def __init__(self, mailer: SendGridClient, settings: Settings) -> None:
        self.mailer = mailer
        self.settings = settings

    async def send_message(self, message: ContactMessage) -> None:
        """Forward a contact form message to the business inbox."""
        await self.mailer.send(
            to_email=self.settings.send_email,
            subject=f"New Contact Message from {message.name}",
            text=build_contact_message_text(message, self.settings),
            reply_to=message.email
        )
        logger.info("Contact form email sent for %s", message.email)

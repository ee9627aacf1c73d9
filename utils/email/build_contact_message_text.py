from config import Settings
from models.contact.contact_message import ContactMessage


def build_contact_message_text(message: ContactMessage, settings: Settings) -> str:
    """Build the plain-text body forwarded to the business for a contact form message."""
    return "\n".join([
        "You have received a new message from the contact form.",
        "",
        f"Name: {message.name}",
        f"Email: {message.email}",
        f"Phone: {message.phone}",
        "",
        "Message:",
        message.message,
        "",
        "-----------------------------",
        "Business Details:",
        settings.business_name,
        f"Phone: {settings.send_phone}",
        f"Email: {settings.send_email}",
        f"Address: {settings.business_address}",
        f"Website: {settings.website_url}",
    ])

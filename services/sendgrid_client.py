import logging

import httpx

from exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridClient:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str | None,
        sender_email: str,
        sender_name: str
    ) -> None:
        self.http_client = http_client
        self.api_key = api_key
        self.sender_email = sender_email
        self.sender_name = sender_name

    async def send(
        self,
        to_email: str,
        subject: str,
        text: str,
        reply_to: str | None = None
    ) -> None:
        """
        Send a plain-text email through the SendGrid v3 API.

        Raises:
            EmailDeliveryError: missing API key, network failure or a
                rejected message
        """
        if not self.api_key:
            raise EmailDeliveryError("Missing SendGrid API key")

        message = {
            "personalizations": [{"to": [{"email": to_email}]}],
            "from": {"email": self.sender_email, "name": self.sender_name},
            "subject": subject,
            "content": [{"type": "text/plain", "value": text}],
        }
        if reply_to:
            message["reply_to"] = {"email": reply_to}

        try:
            response = await self.http_client.post(
                SENDGRID_SEND_URL,
                json=message,
                headers={"Authorization": f"Bearer {self.api_key}"}
            )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Error sending email: {e}") from e

        if response.is_error:
            raise EmailDeliveryError(
                f"Error sending email: SendGrid returned {response.status_code}")

        logger.info("Email '%s' sent to %s", subject, to_email)

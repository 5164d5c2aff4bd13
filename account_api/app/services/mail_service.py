"""
Contact form relay.

``MailService`` turns a contact form submission into an email for the
site operator and hands it to the configured SMTP server with
``aiosmtplib``.  Delivery problems are logged with their full detail
and reported to the caller as a generic ``ExternalServiceError``.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from ..core.config import settings
from ..core.errors import ExternalServiceError
from ..schemas.contact import ContactMessage

logger = logging.getLogger(__name__)

SEND_FAILED = "Failed to send email. Please try again later."


class MailService:
    """Service for relaying contact form messages."""

    @classmethod
    def build_message(cls, data: ContactMessage) -> EmailMessage:
        """Compose the email sent to the operator mailbox.

        The message is sent from the configured mail account; the
        submitter's address goes into ``Reply-To`` so that answering the
        email reaches them directly.
        """
        message = EmailMessage()
        message["From"] = settings.email_user
        message["To"] = settings.contact_recipient
        message["Subject"] = f"Contact Form Message from {data.name or ''}".rstrip()
        if data.email:
            message["Reply-To"] = data.email
        message.set_content(data.message or "")
        return message

    @classmethod
    async def send_contact_message(cls, data: ContactMessage) -> str:
        """Send a contact form submission and return the server response.

        Raises
        ------
        ExternalServiceError
            If the SMTP server cannot be reached, rejects the login or
            refuses the message.
        """
        try:
            message = cls.build_message(data)
            _, response = await aiosmtplib.send(
                message,
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.email_user or None,
                password=settings.email_pass or None,
                start_tls=True,
                timeout=settings.smtp_timeout,
            )
        except (aiosmtplib.SMTPException, OSError, ValueError) as exc:
            logger.exception("Error sending contact email from %s: %s", data.email, exc)
            raise ExternalServiceError(SEND_FAILED) from exc
        logger.info("Contact email sent: %s", response)
        return response

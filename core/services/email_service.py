"""Email service for sending collection reminders via SMTP."""

import re
import smtplib
from email.mime.text import MIMEText

from django.conf import settings

import structlog

from core.exceptions import DeliveryError
from core.schemas import ReminderPayload
from core.services.notification_templates import render_reminder_email

logger = structlog.get_logger(__name__)


class EmailService:
    """Service for sending emails via SMTP.

    This is the mail collaborator of the reminder pipeline. Every failure,
    whether an invalid address, an SMTP error or a socket timeout, is raised
    as :class:`DeliveryError` so callers have one exception to handle.
    """

    def __init__(self) -> None:
        """Initialize email service with SMTP configuration."""
        self.smtp_host = settings.EMAIL_HOST
        self.smtp_port = settings.EMAIL_PORT
        self.smtp_user = settings.EMAIL_HOST_USER
        self.smtp_password = settings.EMAIL_HOST_PASSWORD
        self.use_tls = settings.EMAIL_USE_TLS
        self.timeout = settings.EMAIL_TIMEOUT
        self.from_email = settings.DEFAULT_FROM_EMAIL

    def send_email(
        self,
        to_email: str,
        subject: str,
        body: str,
        from_email: str | None = None,
    ) -> None:
        """Send a plain-text email via SMTP.

        Args:
            to_email: Recipient email address
            subject: Email subject line
            body: Plain-text body
            from_email: Sender email (defaults to DEFAULT_FROM_EMAIL)

        Raises:
            DeliveryError: If the address is invalid or the SMTP exchange fails
        """
        if not self._is_valid_email(to_email):
            raise DeliveryError(to_email, "invalid email address")

        msg = MIMEText(body, "plain", "utf-8")
        msg["Subject"] = subject
        msg["From"] = from_email or self.from_email
        msg["To"] = to_email

        try:
            # The socket timeout bounds how long one recipient can hold a worker.
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()

                if self.smtp_user and self.smtp_password:
                    server.login(self.smtp_user, self.smtp_password)

                server.send_message(msg)

        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "email_send_failed",
                to_email=to_email,
                subject=subject,
                error=str(e),
            )
            raise DeliveryError(to_email, str(e)) from e

        logger.info(
            "email_sent",
            to_email=to_email,
            subject=subject,
        )

    def send_collection_reminder(
        self,
        recipient_email: str,
        payload: ReminderPayload,
        recipient_name: str | None = None,
    ) -> None:
        """Render and send a collection reminder email.

        Args:
            recipient_email: Citizen email address
            payload: Reminder content shared with the in-app channel
            recipient_name: Greeting name (defaults to the address)

        Raises:
            DeliveryError: If the email could not be sent
        """
        subject, body = render_reminder_email(payload, recipient_name or recipient_email)
        self.send_email(to_email=recipient_email, subject=subject, body=body)

    def _is_valid_email(self, email: str) -> bool:
        """Validate email address format.

        Args:
            email: Email address to validate

        Returns:
            True if email is valid, False otherwise
        """
        pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
        return bool(re.match(pattern, email or ""))

# utils/email.py
import requests

import config
from errors import EmailTransportError
from utils.logger import get_logger

logger = get_logger(__name__)

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


class BrevoEmailSender:
     """Sends transactional email through the Brevo HTTP API."""

     def __init__(self, api_key: str | None = None, sender_name: str | None = None, sender_email: str | None = None):
          self.api_key = api_key or config.BREVO_API_KEY
          self.sender_name = sender_name or config.MAIL_FROM_NAME
          self.sender_email = sender_email or config.MAIL_FROM_EMAIL

     def send(self, to_email: str, subject: str, html_body: str) -> None:
          if not self.api_key:
               raise EmailTransportError("BREVO_API_KEY is not set")

          try:
               response = requests.post(
                    BREVO_URL,
                    headers={
                         "api-key": self.api_key,
                         "Content-Type": "application/json",
                    },
                    json={
                         "sender": {"name": self.sender_name, "email": self.sender_email},
                         "to": [{"email": to_email}],
                         "subject": subject,
                         "htmlContent": html_body,
                    },
                    timeout=10,
               )
          except requests.RequestException as e:
               raise EmailTransportError(f"Brevo request failed: {e}") from e

          if response.status_code not in (200, 201, 202):
               raise EmailTransportError(f"Brevo error: {response.text}")
          logger.info("Email '%s' sent to %s", subject, to_email)


def otp_email_body(otp: str, heading: str) -> str:
     return f"""
          <h2>{heading}</h2>
          <h1 style="color:#F28D35">{otp}</h1>
          <p>This code expires in {config.OTP_EXPIRE_MINUTES} minutes.</p>
     """

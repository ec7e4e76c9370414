"""
app/services/smslenz_service.py

Purpose: SMSlenz SMS sending

- Sends one SMS through the SMSlenz HTTP API (form-encoded POST)
- Passes the gateway's status and body through, whatever the status
- Only transport failures and timeouts are errors
"""

from typing import Optional

import httpx

from app.core.config import Settings
from app.core.exceptions import NotificationTimeoutError, NotificationTransportError
from app.core.logging import get_logger
from app.schemas.contact import SmsResult
from utils.constants import SMS_REQUEST_TIMEOUT_SECONDS

logger = get_logger(__name__)

DEFAULT_API_URL = "https://smslenz.lk/api/send-sms"


class SmslenzClient:
    """Client for the SMSlenz send-sms endpoint"""

    def __init__(
        self,
        user_id: Optional[str],
        api_key: Optional[str],
        sender_id: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = SMS_REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.user_id = user_id
        self.api_key = api_key
        self.sender_id = sender_id
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, config: Settings, **kwargs) -> "SmslenzClient":
        return cls(
            user_id=config.SMS_USER_ID,
            api_key=config.SMS_API_KEY,
            sender_id=config.SMS_SENDER_ID,
            api_url=config.SMS_API_URL,
            **kwargs,
        )

    def is_configured(self) -> bool:
        """Check if all SMSlenz credentials are present"""
        return bool(self.user_id and self.api_key and self.sender_id)

    def send_sms(self, contact: str, message: str) -> SmsResult:
        """
        Sends an SMS via SMSlenz

        Args:
            contact: Recipient number, e.g. 94771234567
            message: Message text

        Returns:
            SmsResult with the HTTP status and raw body, including non-2xx replies

        Raises:
            NotificationTimeoutError: no answer within the timeout
            NotificationTransportError: connection or protocol failure
        """
        data = {
            "user_id": self.user_id,
            "api_key": self.api_key,
            "sender_id": self.sender_id,
            "contact": contact,
            "message": message,
        }

        logger.info(f"📤 Sending SMS to {contact}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.api_url, data=data)
        except httpx.TimeoutException as e:
            logger.error(f"SMSlenz API timeout after {self.timeout}s")
            raise NotificationTimeoutError(details=str(e)) from e
        except httpx.RequestError as e:
            logger.error(f"SMSlenz transport error: {e}")
            raise NotificationTransportError(f"SMS request failed: {e}", details=str(e)) from e

        result = SmsResult(status_code=response.status_code, body=response.text or "")

        if result.is_success:
            logger.info(f"✅ SMSlenz accepted message: status={result.status_code}")
        else:
            logger.warning(f"SMSlenz returned {result.status_code}: {result.body[:200]}")

        return result

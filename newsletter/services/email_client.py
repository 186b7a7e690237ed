"""Client for the transactional email provider's HTTP API."""

import asyncio
import logging
from urllib.parse import urljoin

import httpx
from pydantic import SecretStr

from newsletter.domain.subscriber_email import SubscriberEmail
from newsletter.errors import DeliveryError, DeliveryTimeoutError
from newsletter.schemas.email import SendEmailRequest

logger = logging.getLogger(__name__)

SERVER_TOKEN_HEADER = "X-Postmark-Server-Token"
SEND_EMAIL_PATH = "/email"


class EmailClient:
    """
    Sends single emails through the provider, one attempt per call.

    The timeout is fixed at construction and applies to every request made
    through this instance. Instances hold no per-call state and can be shared
    across concurrent tasks.
    """

    def __init__(
        self,
        base_url: str,
        sender: SubscriberEmail,
        authorization_token: SecretStr,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.sender = sender
        self.timeout = timeout
        self._authorization_token = authorization_token
        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __repr__(self) -> str:
        return (
            f"EmailClient(base_url={self.base_url!r}, sender={self.sender.value!r}, "
            f"authorization_token={self._authorization_token!r}, timeout={self.timeout!r})"
        )

    async def __aenter__(self) -> "EmailClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> None:
        """
        Send one email to ``recipient``.

        Args:
            recipient: Validated destination address
            subject: Subject line
            html_body: HTML content
            text_body: Plain text content

        Raises:
            DeliveryTimeoutError: If the exchange does not finish within the timeout.
            DeliveryError: On any other failure sending the request or reading the response.
        """
        url = urljoin(self.base_url, SEND_EMAIL_PATH)
        request_body = SendEmailRequest(
            from_=self.sender.value,
            to=recipient.value,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )

        logger.info("Sending email to %s with subject %r", recipient, subject)
        try:
            # The httpx timeout is per phase; wait_for caps the whole exchange.
            response = await asyncio.wait_for(
                self._http_client.post(
                    url,
                    headers={
                        SERVER_TOKEN_HEADER: self._authorization_token.get_secret_value()
                    },
                    json=request_body.model_dump(by_alias=True),
                ),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error("Email provider timed out after %ss", self.timeout)
            raise DeliveryTimeoutError(
                f"Email provider did not respond within {self.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.error("Failed to reach email provider: %s", e)
            raise DeliveryError(f"Failed to reach email provider: {e}") from e

        if response.is_error:
            logger.warning(
                "Email provider answered with status %s", response.status_code
            )

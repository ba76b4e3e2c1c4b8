"""Expo push gateway adapter: posts message batches over HTTPS with httpx."""

import httpx
import structlog

from notifications.channel.push_port import PushGateway, PushGatewayError
from shared.settings import Settings, get_settings

logger = structlog.get_logger(__name__)


class ExpoPushGateway(PushGateway):
    """Sends batches to the Expo push API (or any gateway speaking its format)."""

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings or get_settings()
        self.url = self.settings.PUSH_GATEWAY_URL
        self.timeout = httpx.Timeout(self.settings.PUSH_TIMEOUT_SECONDS, connect=5.0)
        self._transport = transport

    def _headers(self) -> dict:
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }
        if self.settings.PUSH_ACCESS_TOKEN:
            headers["Authorization"] = f"Bearer {self.settings.PUSH_ACCESS_TOKEN}"
        return headers

    async def send(self, messages: list[dict]) -> dict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=messages, headers=self._headers())
        except httpx.TimeoutException as exc:
            raise PushGatewayError(f"Push gateway timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise PushGatewayError(f"Push gateway request failed: {exc}") from exc

        if response.status_code >= 400:
            logger.error(
                "Push gateway rejected batch",
                status_code=response.status_code,
                batch_size=len(messages),
            )
            raise PushGatewayError(
                f"Push gateway returned {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise PushGatewayError("Push gateway returned a malformed response", status_code=response.status_code) from exc

"""Push dispatcher: fans one notification out to every active device of a user.

Tokens are resolved from the DeviceToken store, turned into one provider
message each, and posted to the gateway in fixed-size batches, one request
at a time. A failed batch is recorded and the remaining batches are still
attempted. There is no retry here; a failed BatchResult is handed back to
the caller.
"""

from dataclasses import dataclass, field

import structlog
from notifications.channel import get_push_gateway
from notifications.channel.push_port import PushGateway
from notifications.device.lookup import active_tokens_for
from shared.settings import Settings, get_settings

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BatchResult:
    """Outcome of posting one batch to the push gateway."""

    batch_index: int
    size: int
    success: bool
    error: str | None = None
    invalid_tokens: tuple[str, ...] = ()
    response: dict = field(default_factory=dict, compare=False)


def chunk(items: list, size: int) -> list[list]:
    if size < 1:
        raise ValueError("Batch size must be at least 1")
    return [items[i : i + size] for i in range(0, len(items), size)]


def _invalid_tokens(batch: list[dict], response: dict) -> tuple[str, ...]:
    """Tokens the gateway reported as no longer registered.

    Tickets come back in the same order as the messages of the batch.
    """
    tickets = response.get("data") if isinstance(response, dict) else None
    if not isinstance(tickets, list):
        return ()

    invalid = []
    for message, ticket in zip(batch, tickets, strict=False):
        if not isinstance(ticket, dict):
            continue
        details = ticket.get("details")
        if not isinstance(details, dict):
            details = {}
        if ticket.get("status") == "error" and details.get("error") == "DeviceNotRegistered":
            invalid.append(message["to"])
    return tuple(invalid)


class PushDispatcher:
    def __init__(self, gateway: PushGateway | None = None, settings: Settings | None = None):
        self._gateway = gateway
        self.settings = settings or get_settings()

    @property
    def gateway(self) -> PushGateway:
        return self._gateway or get_push_gateway()

    def build_message(self, token: str, title: str, body: str, data: dict | None = None) -> dict:
        return {
            "to": token,
            "sound": self.settings.PUSH_SOUND,
            "title": title,
            "body": body,
            "data": data or {},
            "ttl": self.settings.PUSH_TTL_SECONDS,
            "priority": self.settings.PUSH_PRIORITY,
            "badge": self.settings.PUSH_BADGE,
        }

    async def send_batched(self, user_id: str, title: str, body: str, data: dict | None = None) -> list[BatchResult]:
        """Push ``title``/``body`` to every active device of ``user_id``.

        Returns one BatchResult per gateway call; an empty list when the user
        has no active devices.
        """
        tokens = [device_token.token for device_token in active_tokens_for(user_id)]
        if not tokens:
            logger.debug("No active push tokens", user_id=str(user_id))
            return []

        messages = [self.build_message(token, title, body, data) for token in tokens]
        batches = chunk(messages, self.settings.PUSH_BATCH_SIZE)

        results: list[BatchResult] = []
        for index, batch in enumerate(batches):
            try:
                response = await self.gateway.send(batch)
                invalid_tokens = _invalid_tokens(batch, response)
            except Exception as exc:  # One bad batch must not block the remaining ones
                logger.error(
                    "Push batch failed",
                    user_id=str(user_id),
                    batch_index=index,
                    batch_size=len(batch),
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                results.append(BatchResult(batch_index=index, size=len(batch), success=False, error=str(exc) or type(exc).__name__))
                continue

            results.append(
                BatchResult(
                    batch_index=index,
                    size=len(batch),
                    success=True,
                    invalid_tokens=invalid_tokens,
                    response=response if isinstance(response, dict) else {},
                )
            )

        logger.info(
            "Push dispatched",
            user_id=str(user_id),
            tokens=len(tokens),
            batches=len(results),
            failed_batches=sum(1 for r in results if not r.success),
        )
        return results

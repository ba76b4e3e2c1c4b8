"""Fake push gateway: records sent batches for testing."""

from uuid import uuid4

from notifications.channel.push_port import PushGateway, PushGatewayError


class FakePushGateway(PushGateway):
    """Push gateway that records batches in memory for test assertions."""

    def __init__(self):
        self.sent_batches: list[list[dict]] = []
        self.attempts = 0
        self.failing_batches: set[int] = set()
        self.unregistered_tokens: set[str] = set()
        self.failure_reason = "Push gateway unavailable"

    def configure(
        self,
        failing_batches: set[int] | None = None,
        unregistered_tokens: set[str] | None = None,
        failure_reason: str = "Push gateway unavailable",
    ):
        """Configure the fake adapter behavior for testing.

        Args:
            failing_batches: zero-based attempt numbers that raise PushGatewayError
            unregistered_tokens: tokens answered with a DeviceNotRegistered ticket
        """
        self.failing_batches = set(failing_batches or ())
        self.unregistered_tokens = set(unregistered_tokens or ())
        self.failure_reason = failure_reason

    @property
    def sent_messages(self) -> list[dict]:
        return [message for batch in self.sent_batches for message in batch]

    async def send(self, messages: list[dict]) -> dict:
        attempt = self.attempts
        self.attempts += 1

        if attempt in self.failing_batches:
            raise PushGatewayError(self.failure_reason, status_code=503)

        self.sent_batches.append(list(messages))

        tickets = []
        for message in messages:
            if message["to"] in self.unregistered_tokens:
                tickets.append(
                    {
                        "status": "error",
                        "message": f"{message['to']} is not a registered push notification recipient",
                        "details": {"error": "DeviceNotRegistered"},
                    }
                )
            else:
                tickets.append({"status": "ok", "id": f"push-{uuid4().hex[:12]}"})
        return {"data": tickets}

    def reset(self):
        """Clear recorded batches (useful between tests)."""
        self.sent_batches.clear()
        self.attempts = 0
        self.failing_batches = set()
        self.unregistered_tokens = set()
        self.failure_reason = "Push gateway unavailable"

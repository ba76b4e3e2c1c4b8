"""Push gateway port: abstract interface for posting message batches."""

from abc import ABC, abstractmethod


class PushGatewayError(Exception):
    """The gateway call failed: transport error, timeout, or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PushGateway(ABC):
    """Abstract interface for push gateway adapters."""

    @abstractmethod
    async def send(self, messages: list[dict]) -> dict:
        """Post one batch of provider messages in a single request.

        Returns:
            The decoded gateway response. Expo-style gateways answer with
            ``{"data": [ticket, ...]}``, one ticket per message in order.

        Raises:
            PushGatewayError: the batch was not accepted.
        """
        ...

"""Cross-domain event contracts for last-mile delivery of orders."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, String


class DeliveryAssigned(BaseEvent):
    """A driver was assigned to deliver an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    driver_name = String(required=True, max_length=255)


class DeliveryInProgress(BaseEvent):
    """The driver is on the way to the buyer."""

    __version__ = 1

    order_id = Identifier(required=True)


class DeliveryCompleted(BaseEvent):
    """The driver completed the drop-off."""

    __version__ = 1

    order_id = Identifier(required=True)

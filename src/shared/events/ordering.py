"""Cross-domain event contracts for order lifecycle events.

These classes define the event shape that order mutation endpoints hand to
the Notifications domain. They are registered as external events via
domain.register_external_event() in the template registry.
"""

from protean.core.event import BaseEvent
from protean.fields import Float, Identifier, String


class OrderPlaced(BaseEvent):
    """A buyer checked out; the supplier has a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    total = Float(required=True)


class OrderConfirmed(BaseEvent):
    """The supplier confirmed the order."""

    __version__ = 1

    order_id = Identifier(required=True)


class OrderShipped(BaseEvent):
    """The order left the supplier."""

    __version__ = 1

    order_id = Identifier(required=True)
    tracking_id = String(max_length=255)


class OrderDelivered(BaseEvent):
    """The order reached the buyer."""

    __version__ = 1

    order_id = Identifier(required=True)


class OrderCancelled(BaseEvent):
    """The order was cancelled before shipment."""

    __version__ = 1

    order_id = Identifier(required=True)
    reason = String(max_length=500)

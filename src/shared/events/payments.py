"""Cross-domain event contracts for payment outcomes."""

from protean.core.event import BaseEvent
from protean.fields import Float, Identifier, String


class PaymentSucceeded(BaseEvent):
    """Payment for an order was captured."""

    __version__ = 1

    order_id = Identifier(required=True)
    amount = Float(required=True)


class PaymentFailed(BaseEvent):
    """Payment for an order was declined or errored."""

    __version__ = 1

    order_id = Identifier(required=True)
    reason = String(max_length=500)

"""Cross-domain event contracts for reviews and direct messages."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, Integer, String, Text


class RatingReceived(BaseEvent):
    """A buyer rated one of the supplier's products."""

    __version__ = 1

    product_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)


class MessageReceived(BaseEvent):
    """Another user sent a chat message."""

    __version__ = 1

    sender_id = Identifier(required=True)
    sender_name = String(max_length=255)
    preview = Text(required=True)

"""Cross-domain event contracts for product moderation and availability."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, String


class ProductApproved(BaseEvent):
    """An admin approved a supplier's product listing."""

    __version__ = 1

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)


class ProductRejected(BaseEvent):
    """An admin rejected a supplier's product listing."""

    __version__ = 1

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    reason = String(max_length=500)


class ProductOutOfStock(BaseEvent):
    """A wishlisted product sold out."""

    __version__ = 1

    product_id = Identifier(required=True)


class ProductInStock(BaseEvent):
    """A wishlisted product is available again."""

    __version__ = 1

    product_id = Identifier(required=True)

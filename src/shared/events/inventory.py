"""Cross-domain event contracts for supplier inventory alerts."""

from protean.core.event import BaseEvent
from protean.fields import Identifier, Integer, String


class LowInventory(BaseEvent):
    """A product's stock fell below the supplier's threshold."""

    __version__ = 1

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    current_stock = Integer(required=True, min_value=0)

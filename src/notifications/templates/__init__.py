"""Template registry: maps each marketplace event class to its template.

One static table drives both the in-app record and the push payload, so
titles and messages never drift between the two channels.
"""

from notifications.domain import notifications
from notifications.templates.base import RenderedNotification
from notifications.templates.bookings import (
    BookingCancelledTemplate,
    BookingConfirmedTemplate,
    MechanicAssignedTemplate,
)
from notifications.templates.catalogue import (
    ProductApprovedTemplate,
    ProductInStockTemplate,
    ProductOutOfStockTemplate,
    ProductRejectedTemplate,
)
from notifications.templates.delivery import (
    DeliveryAssignedTemplate,
    DeliveryCompletedTemplate,
    DeliveryInProgressTemplate,
)
from notifications.templates.engagement import MessageReceivedTemplate, RatingReceivedTemplate
from notifications.templates.inventory import LowInventoryTemplate
from notifications.templates.ordering import (
    OrderCancelledTemplate,
    OrderConfirmedTemplate,
    OrderDeliveredTemplate,
    OrderPlacedTemplate,
    OrderShippedTemplate,
)
from notifications.templates.payments import PaymentFailedTemplate, PaymentSucceededTemplate
from shared.events.bookings import BookingCancelled, BookingConfirmed, MechanicAssigned
from shared.events.catalogue import ProductApproved, ProductInStock, ProductOutOfStock, ProductRejected
from shared.events.delivery import DeliveryAssigned, DeliveryCompleted, DeliveryInProgress
from shared.events.engagement import MessageReceived, RatingReceived
from shared.events.inventory import LowInventory
from shared.events.ordering import OrderCancelled, OrderConfirmed, OrderDelivered, OrderPlaced, OrderShipped
from shared.events.payments import PaymentFailed, PaymentSucceeded

TEMPLATE_REGISTRY: dict[type, type] = {
    OrderPlaced: OrderPlacedTemplate,
    OrderConfirmed: OrderConfirmedTemplate,
    OrderShipped: OrderShippedTemplate,
    OrderDelivered: OrderDeliveredTemplate,
    OrderCancelled: OrderCancelledTemplate,
    PaymentSucceeded: PaymentSucceededTemplate,
    PaymentFailed: PaymentFailedTemplate,
    ProductApproved: ProductApprovedTemplate,
    ProductRejected: ProductRejectedTemplate,
    ProductOutOfStock: ProductOutOfStockTemplate,
    ProductInStock: ProductInStockTemplate,
    LowInventory: LowInventoryTemplate,
    DeliveryAssigned: DeliveryAssignedTemplate,
    DeliveryInProgress: DeliveryInProgressTemplate,
    DeliveryCompleted: DeliveryCompletedTemplate,
    BookingConfirmed: BookingConfirmedTemplate,
    BookingCancelled: BookingCancelledTemplate,
    MechanicAssigned: MechanicAssignedTemplate,
    RatingReceived: RatingReceivedTemplate,
    MessageReceived: MessageReceivedTemplate,
}

# Stream type strings, one per source context
_EVENT_TYPES = {
    OrderPlaced: "Ordering.OrderPlaced.v1",
    OrderConfirmed: "Ordering.OrderConfirmed.v1",
    OrderShipped: "Ordering.OrderShipped.v1",
    OrderDelivered: "Ordering.OrderDelivered.v1",
    OrderCancelled: "Ordering.OrderCancelled.v1",
    PaymentSucceeded: "Payments.PaymentSucceeded.v1",
    PaymentFailed: "Payments.PaymentFailed.v1",
    ProductApproved: "Catalogue.ProductApproved.v1",
    ProductRejected: "Catalogue.ProductRejected.v1",
    ProductOutOfStock: "Catalogue.ProductOutOfStock.v1",
    ProductInStock: "Catalogue.ProductInStock.v1",
    LowInventory: "Inventory.LowInventory.v1",
    DeliveryAssigned: "Delivery.DeliveryAssigned.v1",
    DeliveryInProgress: "Delivery.DeliveryInProgress.v1",
    DeliveryCompleted: "Delivery.DeliveryCompleted.v1",
    BookingConfirmed: "Bookings.BookingConfirmed.v1",
    BookingCancelled: "Bookings.BookingCancelled.v1",
    MechanicAssigned: "Bookings.MechanicAssigned.v1",
    RatingReceived: "Engagement.RatingReceived.v1",
    MessageReceived: "Engagement.MessageReceived.v1",
}

for _event_cls, _type_string in _EVENT_TYPES.items():
    notifications.register_external_event(_event_cls, _type_string)


def event_type_of(event) -> str:
    """Stream type string for an event instance, e.g. ``Ordering.OrderPlaced.v1``."""
    return _EVENT_TYPES.get(type(event), type(event).__name__)


def get_template(event):
    """Look up the template class for an event instance (or event class)."""
    event_cls = event if isinstance(event, type) else type(event)
    template_cls = TEMPLATE_REGISTRY.get(event_cls)
    if template_cls is None:
        raise ValueError(f"No template registered for event: {event_cls.__name__}")
    return template_cls


def render(event) -> RenderedNotification:
    return get_template(event).render(event)

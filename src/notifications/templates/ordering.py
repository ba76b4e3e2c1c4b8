"""Order lifecycle templates: placed, confirmed, shipped, delivered, cancelled."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification, format_money, with_reason


class OrderPlacedTemplate:
    """Sent to the supplier when a buyer checks out."""

    notification_type = NotificationType.ORDER.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="New Order",
            message=f"New order #{order_id} received for {format_money(event.total)}",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id},
            push_type="ORDER_PLACED",
        )


class OrderConfirmedTemplate:
    notification_type = NotificationType.ORDER_STATUS_UPDATED.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Order Confirmed",
            message=f"Your order #{order_id} has been confirmed",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "CONFIRMED"},
        )


class OrderShippedTemplate:
    notification_type = NotificationType.ORDER_STATUS_UPDATED.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        message = f"Your order #{order_id} has been shipped"
        if event.tracking_id:
            message += f" (Tracking: {event.tracking_id})"
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Order Shipped",
            message=message,
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "SHIPPED", "trackingId": event.tracking_id},
        )


class OrderDeliveredTemplate:
    notification_type = NotificationType.DELIVERY.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Order Delivered",
            message=f"Your order #{order_id} has been delivered!",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "DELIVERED"},
        )


class OrderCancelledTemplate:
    notification_type = NotificationType.ORDER_STATUS_UPDATED.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Order Cancelled",
            message=with_reason(f"Your order #{order_id} has been cancelled", event.reason),
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "CANCELLED", "reason": event.reason},
        )

"""Driver delivery progress templates."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification


class DeliveryAssignedTemplate:
    notification_type = NotificationType.DELIVERY.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Delivery Assigned",
            message=f"{event.driver_name} has been assigned to deliver your order",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "ASSIGNED", "driverName": event.driver_name},
        )


class DeliveryInProgressTemplate:
    notification_type = NotificationType.DELIVERY.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Out for Delivery",
            message="Your order is on the way!",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "IN_PROGRESS"},
        )


class DeliveryCompletedTemplate:
    notification_type = NotificationType.DELIVERY.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Delivered",
            message="Your order has been delivered successfully!",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "status": "COMPLETED"},
        )

"""Payment outcome templates."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification, format_money, with_reason


class PaymentSucceededTemplate:
    notification_type = NotificationType.PAYMENT.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Payment Successful",
            message=f"Payment of {format_money(event.amount)} confirmed for order #{order_id}",
            link=f"/order/{order_id}",
            push_data={"orderId": order_id, "amount": event.amount, "status": "SUCCESS"},
        )


class PaymentFailedTemplate:
    """Links back to checkout so the buyer can retry."""

    notification_type = NotificationType.PAYMENT.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        order_id = str(event.order_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Payment Failed",
            message=with_reason(f"Payment for order #{order_id} failed", event.reason, ". Please try again."),
            link=f"/checkout?orderId={order_id}",
            push_data={"orderId": order_id, "status": "FAILED", "reason": event.reason},
        )

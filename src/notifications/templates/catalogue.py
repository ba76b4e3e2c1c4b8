"""Product moderation and stock availability templates."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification, with_reason


class ProductApprovedTemplate:
    notification_type = NotificationType.PRODUCT.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        product_id = str(event.product_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Product Approved",
            message=f'Your product "{event.product_name}" has been approved and is now live!',
            link=f"/product/{product_id}",
            push_data={"productId": product_id, "status": "APPROVED"},
        )


class ProductRejectedTemplate:
    notification_type = NotificationType.PRODUCT.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        product_id = str(event.product_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Product Rejected",
            message=with_reason(f'Your product "{event.product_name}" was not approved', event.reason),
            link=f"/product/{product_id}",
            push_data={"productId": product_id, "status": "REJECTED", "reason": event.reason},
        )


# Wishlist watchers are the recipients of the two availability templates.
class ProductOutOfStockTemplate:
    notification_type = NotificationType.LOW_INVENTORY.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        product_id = str(event.product_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Out of Stock",
            message="A product you wishlisted is now out of stock",
            link=f"/product/{product_id}",
            push_data={"productId": product_id, "status": "OUT_OF_STOCK"},
        )


class ProductInStockTemplate:
    notification_type = NotificationType.PRODUCT.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        product_id = str(event.product_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Back in Stock",
            message="A product you wishlisted is back in stock!",
            link=f"/product/{product_id}",
            push_data={"productId": product_id, "status": "IN_STOCK"},
        )

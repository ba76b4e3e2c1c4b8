"""Low inventory alert, sent to the supplier."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification


class LowInventoryTemplate:
    notification_type = NotificationType.LOW_INVENTORY.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        product_id = str(event.product_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="Low Inventory Alert",
            message=f'"{event.product_name}" stock is low ({event.current_stock} remaining)',
            link=f"/product/{product_id}",
            push_data={"productId": product_id, "currentStock": event.current_stock},
        )

"""Reviews and chat templates."""

from notifications.notification.notification import NotificationType
from notifications.templates.base import RenderedNotification, clip_title

PREVIEW_LENGTH = 100


class RatingReceivedTemplate:
    notification_type = NotificationType.REVIEW.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        product_id = str(event.product_id)
        return RenderedNotification(
            notification_type=cls.notification_type,
            title="New Review",
            message=f"Someone rated your product {event.rating} stars",
            link=f"/product/{product_id}",
            push_data={"productId": product_id, "rating": event.rating},
        )


class MessageReceivedTemplate:
    notification_type = NotificationType.SYSTEM.value

    @classmethod
    def render(cls, event) -> RenderedNotification:
        return RenderedNotification(
            notification_type=cls.notification_type,
            title=clip_title(f"Message from {event.sender_name or 'User'}"),
            message=event.preview[:PREVIEW_LENGTH],
            link="/chat",
            push_data={"senderId": str(event.sender_id)},
        )

"""Notification aggregate: the in-app record shown in a user's notification center.

In-app delivery is the guaranteed channel. A Notification is created once per
recipient per event and is immutable afterwards except for the read flag,
which only ever moves from unread to read.
"""

from datetime import UTC, datetime
from enum import Enum

from notifications.domain import notifications
from notifications.notification.events import NotificationCreated, NotificationRead
from protean.fields import Boolean, DateTime, Identifier, String, Text

TITLE_MAX_LENGTH = 255


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationType(Enum):
    ORDER = "ORDER"
    ORDER_STATUS_UPDATED = "ORDER_STATUS_UPDATED"
    PAYMENT = "PAYMENT"
    PRODUCT = "PRODUCT"
    DELIVERY = "DELIVERY"
    BOOKING = "BOOKING"
    REVIEW = "REVIEW"
    LOW_INVENTORY = "LOW_INVENTORY"
    SYSTEM = "SYSTEM"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifications.aggregate
class Notification:
    """An in-app notification owned by a single recipient.

    Content is fixed once stored; NotificationRepository only persists
    changes to the read flag.
    """

    user_id: Identifier(required=True)
    notification_type: String(choices=NotificationType, required=True)

    # Content
    title: String(required=True, max_length=TITLE_MAX_LENGTH)
    message: Text(required=True)
    link: String(max_length=500)  # Deep-link into the app, optional

    # Source event correlation
    source_event_type: String(max_length=200)

    read: Boolean(default=False)
    read_at: DateTime()

    created_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, notification_type, title, message, link=None, source_event_type=None):
        """Create an unread notification for ``user_id``."""
        now = datetime.now(UTC)

        notification = cls(
            user_id=user_id,
            notification_type=notification_type,
            title=title,
            message=message,
            link=link,
            source_event_type=source_event_type,
            read=False,
            created_at=now,
        )

        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                user_id=str(user_id),
                notification_type=notification_type,
                title=title,
                link=link,
                source_event_type=source_event_type,
                created_at=now,
            )
        )

        return notification

    def mark_read(self, read_at=None):
        """Flag the notification as read. Marking twice is a no-op."""
        if self.read:
            return

        now = read_at or datetime.now(UTC)
        self.read = True
        self.read_at = now

        self.raise_(
            NotificationRead(
                notification_id=str(self.id),
                user_id=str(self.user_id),
                read_at=now,
            )
        )

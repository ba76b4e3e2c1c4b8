"""Domain events for the Notification aggregate."""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, String


@notifications.event(part_of="Notification")
class NotificationCreated:
    """An in-app notification was stored for a recipient."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    notification_type: String(required=True)
    title: String(required=True)
    link: String()
    source_event_type: String()
    created_at: DateTime(required=True)


@notifications.event(part_of="Notification")
class NotificationRead:
    """The recipient opened the notification."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    read_at: DateTime(required=True)

"""Repository for the Notification aggregate."""

from notifications.domain import notifications
from notifications.notification.notification import Notification
from protean.core.repository import BaseRepository
from protean.exceptions import ValidationError

# Everything except the read flag is fixed once a notification is stored
CONTENT_FIELDS = (
    "user_id",
    "notification_type",
    "title",
    "message",
    "link",
    "source_event_type",
    "created_at",
)


@notifications.repository(part_of=Notification)
class NotificationRepository(BaseRepository):
    """Persists notifications and refuses edits to stored content."""

    def add(self, notification):
        if notification.state_.is_persisted:
            stored = self._dao.get(notification.id)
            changed = [name for name in CONTENT_FIELDS if getattr(stored, name) != getattr(notification, name)]
            if changed:
                raise ValidationError({name: ["Notification content cannot be changed"] for name in changed})
        return super().add(notification)


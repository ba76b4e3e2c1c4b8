"""NotificationInbox: per-user unread badge and inbox summary."""

from notifications.domain import notifications
from notifications.notification.events import NotificationCreated, NotificationRead
from notifications.notification.notification import Notification
from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Identifier, Integer
from protean.utils.globals import current_domain


@notifications.projection
class NotificationInbox:
    user_id: Identifier(identifier=True, required=True)
    total_count: Integer(default=0)
    unread_count: Integer(default=0)
    last_notification_at: DateTime()
    last_read_at: DateTime()


@notifications.projector(projector_for=NotificationInbox, aggregates=[Notification])
class NotificationInboxProjector:
    def _get_or_create(self, user_id):
        repo = current_domain.repository_for(NotificationInbox)
        try:
            return repo.get(user_id)
        except ObjectNotFoundError:
            return NotificationInbox(user_id=user_id, total_count=0, unread_count=0)

    @on(NotificationCreated)
    def on_notification_created(self, event):
        inbox = self._get_or_create(event.user_id)
        inbox.total_count += 1
        inbox.unread_count += 1
        inbox.last_notification_at = event.created_at
        current_domain.repository_for(NotificationInbox).add(inbox)

    @on(NotificationRead)
    def on_notification_read(self, event):
        inbox = self._get_or_create(event.user_id)
        inbox.unread_count = max(0, inbox.unread_count - 1)
        inbox.last_read_at = event.read_at
        current_domain.repository_for(NotificationInbox).add(inbox)

"""Domain events for the DeviceToken aggregate."""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, String


@notifications.event(part_of="DeviceToken")
class DeviceTokenRegistered:
    """A device registered (or re-registered) a push token for a user."""

    __version__ = 1

    device_token_id: Identifier(required=True)
    user_id: Identifier(required=True)
    platform: String()
    device_name: String()
    registered_at: DateTime(required=True)


@notifications.event(part_of="DeviceToken")
class DeviceTokenDeactivated:
    """A push token stopped being eligible for delivery."""

    __version__ = 1

    device_token_id: Identifier(required=True)
    user_id: Identifier(required=True)
    reason: String(required=True)
    deactivated_at: DateTime(required=True)

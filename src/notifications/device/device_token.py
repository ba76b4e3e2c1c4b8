"""DeviceToken aggregate: one push endpoint owned by one user.

A user may hold many tokens (one per installed device). Only active tokens
are resolved at notify time. Registering a token that already exists for
the user reactivates it instead of creating a duplicate.
"""

from datetime import UTC, datetime
from enum import Enum

from notifications.device.events import DeviceTokenDeactivated, DeviceTokenRegistered
from notifications.domain import notifications
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String


class DevicePlatform(Enum):
    IOS = "ios"
    ANDROID = "android"
    WEB = "web"


class DeactivationReason(Enum):
    LOGGED_OUT = "LoggedOut"
    DEVICE_NOT_REGISTERED = "DeviceNotRegistered"
    REPLACED = "Replaced"


@notifications.aggregate
class DeviceToken:
    user_id: Identifier(required=True)
    token: String(required=True, max_length=500)
    platform: String(choices=DevicePlatform)
    device_name: String(max_length=200)
    is_active: Boolean(default=True)
    deactivation_reason: String(max_length=200)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, user_id, token, platform=None, device_name=None):
        """Create an active token for ``user_id``."""
        if not token or not str(token).strip():
            raise ValidationError({"token": ["Push token cannot be blank"]})

        now = datetime.now(UTC)
        device_token = cls(
            user_id=user_id,
            token=token,
            platform=platform,
            device_name=device_name,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        device_token._raise_registered(now)
        return device_token

    def reactivate(self, platform=None, device_name=None):
        """Re-register an existing token, refreshing its device details."""
        now = datetime.now(UTC)
        self.is_active = True
        self.deactivation_reason = None
        if platform:
            self.platform = platform
        if device_name:
            self.device_name = device_name
        self.updated_at = now
        self._raise_registered(now)

    def deactivate(self, reason=DeactivationReason.LOGGED_OUT.value):
        if not self.is_active:
            return

        now = datetime.now(UTC)
        self.is_active = False
        self.deactivation_reason = reason
        self.updated_at = now

        self.raise_(
            DeviceTokenDeactivated(
                device_token_id=str(self.id),
                user_id=str(self.user_id),
                reason=reason,
                deactivated_at=now,
            )
        )

    def _raise_registered(self, now):
        self.raise_(
            DeviceTokenRegistered(
                device_token_id=str(self.id),
                user_id=str(self.user_id),
                platform=self.platform,
                device_name=self.device_name,
                registered_at=now,
            )
        )

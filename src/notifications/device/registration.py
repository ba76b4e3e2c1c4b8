"""Device token commands + handler: register and deactivate push endpoints."""

import structlog
from notifications.device.device_token import DeactivationReason, DeviceToken
from notifications.device.lookup import find_by_token_value, find_token
from notifications.domain import notifications
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

logger = structlog.get_logger(__name__)


@notifications.command(part_of="DeviceToken")
class RegisterDeviceToken:
    """A device reported its push token after login."""

    user_id: Identifier(required=True)
    token: String(required=True, max_length=500)
    platform: String(max_length=20)
    device_name: String(max_length=200)


@notifications.command(part_of="DeviceToken")
class DeactivateDeviceToken:
    """Stop pushing to a token (logout, uninstall, or gateway rejection)."""

    user_id: Identifier(required=True)
    token: String(required=True, max_length=500)
    reason: String(max_length=200, default=DeactivationReason.LOGGED_OUT.value)


@notifications.command_handler(part_of=DeviceToken)
class DeviceTokenCommandHandler:
    @handle(RegisterDeviceToken)
    def register_device_token(self, command: RegisterDeviceToken):
        repo = current_domain.repository_for(DeviceToken)
        existing = find_token(command.user_id, command.token)

        if existing:
            existing.reactivate(platform=command.platform, device_name=command.device_name)
            repo.add(existing)
            return str(existing.id)

        device_token = DeviceToken.register(
            user_id=command.user_id,
            token=command.token,
            platform=command.platform,
            device_name=command.device_name,
        )
        repo.add(device_token)
        logger.info(
            "Device token registered",
            user_id=str(command.user_id),
            platform=command.platform,
        )
        return str(device_token.id)

    @handle(DeactivateDeviceToken)
    def deactivate_device_token(self, command: DeactivateDeviceToken):
        device_token = find_token(command.user_id, command.token)
        if device_token is None:
            raise ObjectNotFoundError({"token": [f"Token not registered for user {command.user_id}"]})

        device_token.deactivate(command.reason)
        current_domain.repository_for(DeviceToken).add(device_token)


def deactivate_tokens(tokens: list[str], reason: str = DeactivationReason.DEVICE_NOT_REGISTERED.value) -> int:
    """Deactivate every active row holding one of ``tokens``; returns the count."""
    repo = current_domain.repository_for(DeviceToken)
    rows = find_by_token_value(tokens)
    for device_token in rows:
        device_token.deactivate(reason)
        repo.add(device_token)
    if rows:
        logger.info("Deactivated rejected device tokens", count=len(rows), reason=reason)
    return len(rows)

"""Push gateway registry.

Provides get_push_gateway() / set_push_gateway() to swap implementations:
- ExpoPushGateway by default, configured from settings
- FakePushGateway for development and testing
"""

from notifications.channel.push_port import PushGateway

_current_gateway: PushGateway | None = None


def get_push_gateway() -> PushGateway:
    """Return the current push gateway. Defaults to ExpoPushGateway."""
    global _current_gateway
    if _current_gateway is None:
        from notifications.channel.expo_push import ExpoPushGateway

        _current_gateway = ExpoPushGateway()
    return _current_gateway


def set_push_gateway(gateway: PushGateway) -> None:
    """Override the active push gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_push_gateway() -> None:
    """Reset to the default gateway."""
    global _current_gateway
    _current_gateway = None

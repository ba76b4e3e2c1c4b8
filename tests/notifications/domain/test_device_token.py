"""Tests for the DeviceToken aggregate."""

import pytest
from notifications.device.device_token import DeactivationReason, DevicePlatform, DeviceToken
from notifications.device.events import DeviceTokenDeactivated, DeviceTokenRegistered
from protean.exceptions import ValidationError


class TestRegister:
    def test_register_creates_active_token(self):
        dt = DeviceToken.register(user_id="user-dt-1", token="ExponentPushToken[abc]", platform="ios")
        assert dt.is_active is True
        assert dt.platform == DevicePlatform.IOS.value
        assert dt.created_at is not None

    def test_register_raises_event(self):
        dt = DeviceToken.register(user_id="user-dt-1", token="ExponentPushToken[abc]")
        assert len(dt._events) == 1
        assert isinstance(dt._events[0], DeviceTokenRegistered)
        assert dt._events[0].device_token_id == str(dt.id)

    def test_blank_token_rejected(self):
        with pytest.raises(ValidationError):
            DeviceToken.register(user_id="user-dt-1", token="   ")

    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            DeviceToken.register(user_id="user-dt-1", token="tok", platform="blackberry")


class TestDeactivate:
    def setup_method(self):
        self.dt = DeviceToken.register(user_id="user-dt-2", token="ExponentPushToken[xyz]")
        self.dt._events.clear()

    def test_deactivate_flips_flag(self):
        self.dt.deactivate()
        assert self.dt.is_active is False
        assert self.dt.deactivation_reason == DeactivationReason.LOGGED_OUT.value

    def test_deactivate_records_reason(self):
        self.dt.deactivate(DeactivationReason.DEVICE_NOT_REGISTERED.value)
        assert self.dt.deactivation_reason == "DeviceNotRegistered"
        assert isinstance(self.dt._events[-1], DeviceTokenDeactivated)

    def test_deactivate_twice_is_noop(self):
        self.dt.deactivate()
        self.dt.deactivate()
        assert len(self.dt._events) == 1

    def test_reactivate_refreshes_details(self):
        self.dt.deactivate()
        self.dt.reactivate(platform="android", device_name="Pixel 8")
        assert self.dt.is_active is True
        assert self.dt.deactivation_reason is None
        assert self.dt.platform == "android"
        assert self.dt.device_name == "Pixel 8"
        assert isinstance(self.dt._events[-1], DeviceTokenRegistered)

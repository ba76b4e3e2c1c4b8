import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def notifications_bed():
    from notifications.domain import notifications

    bed = DomainFixture(notifications)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(notifications_bed):
    from notifications.channel import reset_push_gateway
    from notifications.recipients import reset_directory
    from protean import current_domain

    with notifications_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_push_gateway()
    reset_directory()


@pytest.fixture()
def fake_gateway():
    from notifications.channel import set_push_gateway
    from notifications.channel.fake_push import FakePushGateway

    gateway = FakePushGateway()
    set_push_gateway(gateway)
    return gateway


@pytest.fixture()
def fake_directory():
    from notifications.recipients import set_directory
    from notifications.recipients.fake_directory import FakeRecipientDirectory

    directory = FakeRecipientDirectory()
    set_directory(directory)
    return directory


@pytest.fixture()
def register_tokens():
    """Store ``count`` active tokens for a user, returning the token strings."""
    from notifications.device.device_token import DeviceToken
    from protean import current_domain

    def _register(user_id, count=1, prefix="ExponentPushToken"):
        repo = current_domain.repository_for(DeviceToken)
        tokens = []
        for i in range(count):
            token = f"{prefix}[{user_id}-{i}]"
            repo.add(DeviceToken.register(user_id=user_id, token=token, platform="android"))
            tokens.append(token)
        return tokens

    return _register

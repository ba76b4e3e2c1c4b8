import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def tracking_bed():
    from tracking.domain import tracking

    bed = DomainFixture(tracking)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(tracking_bed):
    from protean import current_domain

    with tracking_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def billing_bed():
    from billing.domain import billing

    bed = DomainFixture(billing)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(billing_bed):
    with billing_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _settings():
    from billing.config import reset_settings

    reset_settings()
    yield
    reset_settings()

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from portfolio.main import app
from portfolio.api.endpoints.contact import get_contact_service
from portfolio.core.rate_limit import limiter
from portfolio.services.contact_service import ContactService
from portfolio.tests.fixtures.contact import *


@pytest.fixture(scope="function", autouse=True)
def reset_rate_limits():
    """Fixture clearing the in-memory rate limit counters around every test."""
    limiter.reset()
    yield
    limiter.reset()


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def client(mock_mongo_connection, mock_accept_hook):
    """Fixture providing a TestClient whose contact service uses a mock accept step."""
    app.dependency_overrides[get_contact_service] = lambda: ContactService(
        on_accept=mock_accept_hook
    )

    with TestClient(app) as c:
        yield c

    # Clean up overrides after the test finished
    app.dependency_overrides.clear()

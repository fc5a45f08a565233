import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from emart.auth.tokens import create_access_token
from emart.config.database import DatabaseManager
from emart.config.settings import Settings
from emart.main import create_app

TEST_SECRET = "test-access-token-secret-with-enough-bytes"


class FakePaymentGateway:
    """Records requested amounts instead of calling Stripe."""

    def __init__(self):
        self.amounts = []

    async def create_payment_intent(self, amount):
        self.amounts.append(amount)
        return f"pi_test_{len(self.amounts)}_secret_abc"


@pytest.fixture
def settings():
    return Settings(
        access_token_secret=TEST_SECRET,
        stripe_secret_key="sk_test_dummy",
        database_name="e-mart-test",
        default_page_size=2,
    )


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def app(settings, gateway):
    db_manager = DatabaseManager(settings, client=AsyncMongoMockClient())
    return create_app(settings, db_manager=db_manager, payment_gateway=gateway)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(settings):
    token = create_access_token("admin@x.com", settings)
    return {"Authorization": f"Bearer {token}"}

import pytest
from fastapi.testclient import TestClient

from orders_api.config import Settings
from orders_api.main import create_app
from orders_api.services.order_service import OrderService
from tests.fakes import FakeClock, FakeOrderRepository


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_repository(clock):
    return FakeOrderRepository(clock)


@pytest.fixture
def service(fake_repository):
    return OrderService(fake_repository, max_page_size=50)


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}"


@pytest.fixture
def settings(database_url):
    return Settings(
        database_url=database_url,
        create_tables=True,
        max_page_size=50,
        _env_file=None,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client

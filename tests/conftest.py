import pytest
from fastapi.testclient import TestClient

from rental_desk.config import Settings
from rental_desk.main import create_app
from rental_desk.services import DataStore, RentalManager


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def seeded_store():
    store = DataStore()
    store.seed_sample_data()
    return store


@pytest.fixture
def manager(seeded_store):
    return RentalManager(seeded_store)


@pytest.fixture
def empty_manager(store):
    return RentalManager(store)


@pytest.fixture
def client(manager):
    app = create_app(manager=manager, app_settings=Settings(SEED_SAMPLE_DATA=False))
    with TestClient(app) as test_client:
        yield test_client


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )

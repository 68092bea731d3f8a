from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from hovenier.api.deps import get_store
from hovenier.config import CalculationConfig
from hovenier.engine.context import CalcContext
from hovenier.reference.loader import load_reference_data
from hovenier.store.memory import InMemoryStore

D = Decimal


@pytest.fixture(scope="session")
def reference():
    # meegeleverde YAML tabellen
    return load_reference_data()


@pytest.fixture
def config():
    return CalculationConfig()


@pytest.fixture
def ctx(reference, config):
    return CalcContext(reference=reference, config=config)


@pytest.fixture
def store(reference):
    return InMemoryStore(reference)


@pytest.fixture
def client(store):
    from hovenier.main import app

    # verse store per test, geen gedeelde state tussen tests
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()

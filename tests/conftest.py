# tests/conftest.py
import os
import sys

import pytest
from fastapi.testclient import TestClient

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from components_api.config import Settings  # noqa: E402
from components_api.database import Database  # noqa: E402
from components_api.main import create_app  # noqa: E402
from components_api.repository.util import get_repository  # noqa: E402

STRATEGIES = ["sql", "orm"]

RYZEN = {"name": "Ryzen 5 5600", "type": "CPU", "brand": "AMD", "price": 129.99, "stock": 12}


@pytest.fixture
def database(tmp_path):
    """
    A fresh SQLite file database per test with the components table created.
    Disposed after the test.
    """
    db = Database(f"sqlite:///{tmp_path / 'components.db'}")
    db.create_schema()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture(params=STRATEGIES)
def data_access(request):
    """Runs the requesting test once per repository strategy."""
    return request.param


@pytest.fixture
def repo(database, data_access):
    return get_repository(data_access, database)


@pytest.fixture
def make_settings(tmp_path):
    def _fn(**overrides):
        values = {
            "DATA_ACCESS": "sql",
            "LOG_LEVEL": "WARNING",
            "STATIC_DIR": str(tmp_path / "no-static"),
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _fn


@pytest.fixture
def client(database, data_access, make_settings):
    """TestClient with the lifespan running, so app.state.repository is set."""
    app = create_app(make_settings(DATA_ACCESS=data_access), database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def ryzen_payload():
    return dict(RYZEN)

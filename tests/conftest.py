import os
import sys

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from resource_store_api.app.main import SEED_RESOURCES, create_app  # noqa: E402
from resource_store_api.app.services.resource_store import ResourceStore  # noqa: E402


@pytest.fixture
def store():
    """A fresh store holding the two seed resources."""
    return ResourceStore(SEED_RESOURCES)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)

import pytest
from fastapi.testclient import TestClient

from amounts.main import app


@pytest.fixture
def client():
    """Test client for the amounts API."""
    with TestClient(app) as c:
        yield c

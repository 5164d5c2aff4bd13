import os
import tempfile

# Settings are read when ``account_api`` is first imported, so the test
# environment has to be in place before that.
os.environ["USERS_FILE"] = os.path.join(tempfile.mkdtemp(prefix="account-api-"), "users.json")
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["EMAIL_USER"] = "operator@example.com"
os.environ["EMAIL_PASS"] = "app-password"
os.environ.pop("CONTACT_RECIPIENT", None)
os.environ.pop("CORS_ORIGINS", None)

import pytest
from fastapi.testclient import TestClient

from account_api.app.core.store import InMemoryStore, get_store
from account_api.app.main import app


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_user_data():
    return {
        "email": "a@x.com",
        "password": "testpassword123",
        "fullname": "Test User",
        "phone": "12345678",
        "city": "Copenhagen",
        "country": "Denmark",
    }


@pytest.fixture
def created_user(client, test_user_data):
    response = client.post("/api/register", json=test_user_data)
    assert response.status_code == 201
    return test_user_data

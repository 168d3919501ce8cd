import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from formapi.config import TestConfig
from formapi.database import FormDataGateway
from formapi.main import create_app


@pytest.fixture
def valid_payload():
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "password": "p1",
        "contact": "555-0100",
        "address": "1 Main St",
        "nationalId": "123456789012",
        "dateOfBirth": "1990-01-01",
    }


@pytest.fixture
def gateway():
    collection = AsyncMongoMockClient()["formdata_test"]["FormData"]
    return FormDataGateway(collection)


@pytest.fixture
def config():
    return TestConfig()


@pytest.fixture
def client(config, gateway):
    app = create_app(config=config, gateway=gateway)
    with TestClient(app) as c:
        yield c

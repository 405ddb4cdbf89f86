import os

# Must be set before anything under app/ is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_CREATE_TABLES"] = "true"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.database import SessionLocal, create_database_tables, drop_database_tables
from app.main import app


@pytest.fixture(autouse=True)
def tables():
    create_database_tables()
    yield
    drop_database_tables()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def create(client):
    """POST a student and return the response body."""
    def _create(name):
        response = client.post("/students", json={"name": name})
        assert response.status_code == 201
        return response.json()
    return _create

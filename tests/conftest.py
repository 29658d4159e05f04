"""
Shared pytest fixtures.

Fixture Hierarchy:
    ├── database: Database bound to an in-memory mongomock client
    ├── app / client: Flask app with default (always 200) status codes
    └── strict_app / strict_client: Flask app with 404/500 status codes
"""
import os

import mongomock
import pytest

# Keep test runs off any real server configured in a local .env
os.environ["MONGODB_URI"] = "mongodb://localhost:27017/"
os.environ["MONGODB_DB"] = "wikiDB_test"

from wiki_api import create_app
from wiki_api.model.database import Database


@pytest.fixture
def database():
    """A Database wrapping a fresh mongomock client."""
    db = Database(client=mongomock.MongoClient())
    yield db
    db.close()


@pytest.fixture
def app(database):
    return create_app({"TESTING": True}, database=database)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def strict_app(database):
    return create_app({"TESTING": True, "WIKI_STRICT_STATUS": True}, database=database)


@pytest.fixture
def strict_client(strict_app):
    return strict_app.test_client()


@pytest.fixture
def article_model(app):
    return app.extensions["wiki_api"]


@pytest.fixture
def seed(client):
    """Insert articles through the API; returns the helper."""
    def _seed(*articles):
        for title, content in articles:
            client.post("/articles", data={"title": title, "content": content})
    return _seed

"""Pytest configuration: in-memory database and a Flask test client."""

import os

# Settings are read at import time, so set them before the app module loads
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BINSORT_MODEL_PATH", "missing-model.pth")

import pytest

from app import app as flask_app
from extensions import db


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True)
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()
    flask_app.extensions.pop("carbon_estimator", None)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in_client(client):
    resp = client.post("/signup", json={
        "email": "sam@example.com",
        "password": "secret123",
        "full_name": "Sam Green",
    })
    assert resp.status_code == 201
    return client

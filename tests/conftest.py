from datetime import timedelta

import mongomock
import pytest
from fastapi.testclient import TestClient

from restaurant_api.core.config import Settings
from restaurant_api.core.security import create_access_token
from restaurant_api.main import create_app

SECRET = "test-secret"
OWNER = "owner@example.com"


@pytest.fixture
def settings():
    return Settings(_env_file=None, ACCESS_TOKEN_SECRET=SECRET, LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings, mongomock.MongoClient())


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    return app.state.database


@pytest.fixture
def signed_in(client):
    """Client carrying a valid session cookie for OWNER"""
    token = create_access_token({"email": OWNER}, SECRET, timedelta(hours=1))
    client.cookies.set("token", token)
    return client


def make_food(name, price=10.0, order_count=0, email=OWNER, **extra):
    food = {
        "name": name,
        "category": "Main",
        "origin": "Thai",
        "price": price,
        "quantity": 20,
        "image": f"https://img.example.com/{name}.png",
        "description": f"{name} from the kitchen",
        "userName": "Owner",
        "userEmail": email,
        "orderCount": order_count,
    }
    food.update(extra)
    return food

from datetime import timedelta

from restaurant_api.core.security import create_access_token, verify_token
from tests.conftest import OWNER, SECRET

API = "/api/v1"


def test_root_and_health(client):
    response = client.get(API)
    assert response.status_code == 200
    assert response.text == "restaurant server is running"

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["service"] == "restaurant-api"


def test_jwt_sets_http_only_cookie(client):
    response = client.post(f"{API}/jwt", json={"email": OWNER})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()

    result = verify_token(response.cookies["token"], SECRET)
    assert result.ok
    assert result.claims["email"] == OWNER


def test_jwt_requires_identity(client):
    assert client.post(f"{API}/jwt", json={}).status_code == 422


def test_cookie_from_jwt_opens_protected_routes(client):
    client.post(f"{API}/jwt", json={"email": OWNER})
    response = client.get(f"{API}/cart", params={"email": OWNER})
    assert response.status_code == 200
    assert response.json() == {"orders": []}


def test_logout_clears_cookie(client):
    response = client.post(f"{API}/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "Max-Age=0" in set_cookie


def test_missing_cookie_is_unauthorized(client):
    response = client.get(f"{API}/cart", params={"email": OWNER})
    assert response.status_code == 401
    assert response.json() == {"detail": "unauthorized access"}


def test_token_from_other_secret_is_unauthorized(client):
    client.cookies.set("token", create_access_token({"email": OWNER}, "other", timedelta(hours=1)))
    assert client.get(f"{API}/cart", params={"email": OWNER}).status_code == 401


def test_expired_token_is_unauthorized(client):
    client.cookies.set("token", create_access_token({"email": OWNER}, SECRET, timedelta(seconds=-5)))
    assert client.get(f"{API}/user/added-foods", params={"email": OWNER}).status_code == 401


def test_email_mismatch_is_forbidden(signed_in):
    for path in ("/cart", "/user/added-foods"):
        response = signed_in.get(f"{API}{path}", params={"email": "someone@example.com"})
        assert response.status_code == 403
        assert response.json() == {"detail": "forbidden access"}


def test_email_comparison_is_case_sensitive(signed_in):
    response = signed_in.get(f"{API}/cart", params={"email": OWNER.upper()})
    assert response.status_code == 403


def test_missing_email_is_forbidden(signed_in):
    assert signed_in.get(f"{API}/cart").status_code == 403

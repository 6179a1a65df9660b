"""
HTTP tests for the FastLog API.

Flow covered:
1. POST /api/register (multipart with avatar) -> 201 + session cookie
2. GET  /api/user / POST /api/login / POST /api/logout
3. POST /api/fasts/start -> POST /api/fasts/{id}/meals -> POST /api/fasts/{id}/end
4. GET  /api/fasts and GET /api/fasts/{id}/meals
5. Ownership checks between two users
"""

from datetime import timedelta

from app.config import settings
from main import app
from test_fixtures import PNG_BYTES, REALISTIC_USERS, new_client, register


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client):
    r = client.get("/api/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "FastLog"
    assert body["storage"] == "memory"


# =============================================================================
# AUTH
# =============================================================================


def test_register_returns_user_without_password(client):
    r = register(client, username="Sarah.Martinez")

    assert r.status_code == 201, r.text
    body = r.json()
    assert body["username"] == "sarah.martinez"
    assert body["firstName"] == "Sarah"
    assert body["lastName"] == "Martinez"
    assert body["city"] == "Austin"
    assert body["state"] == "TX"
    assert body["country"] == "USA"
    assert body["avatar"].startswith("/uploads/avatar-")
    assert "password" not in body
    assert "passwordHash" not in body
    assert settings.session_cookie_name in r.cookies


def test_register_session_cookie_flags(client):
    r = register(client)
    cookie_header = r.headers["set-cookie"].lower()
    assert "httponly" in cookie_header
    assert f"max-age={settings.session_ttl_hours * 3600}" in cookie_header


def test_register_logs_user_in(client):
    register(client)
    r = client.get("/api/user")
    assert r.status_code == 200
    assert r.json()["username"] == REALISTIC_USERS["default"]["username"]


def test_registered_avatar_is_served(client):
    avatar = register(client).json()["avatar"]
    r = client.get(avatar)
    assert r.status_code == 200
    assert r.content == PNG_BYTES


def test_register_duplicate_username(client):
    assert register(client).status_code == 201
    r = register(new_client(), username="SARAH.MARTINEZ")

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "DUPLICATE_USERNAME"
    assert r.json()["message"] == "Username already exists"


def test_register_missing_field(client):
    form = {k: v for k, v in REALISTIC_USERS["default"].items() if k != "city"}
    r = client.post(
        "/api/register", data=form, files={"avatar": ("a.png", PNG_BYTES, "image/png")}
    )
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "MISSING_FIELD"
    assert "city" in r.json()["message"]


def test_register_requires_avatar(client):
    r = register(client, avatar=False)
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_AVATAR"
    assert client.get("/api/user").status_code == 401


def test_register_rejects_non_image_avatar(client):
    r = register(client, avatar=("notes.txt", b"not an image", "text/plain"))
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_AVATAR"


def test_register_rejects_oversized_avatar(client, monkeypatch):
    monkeypatch.setattr(app.state.avatar_store, "max_bytes", 16)

    r = register(client, avatar=("big.png", PNG_BYTES, "image/png"))

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_AVATAR"
    assert r.json()["error"]["details"] == {"max_bytes": 16}
    assert settings.session_cookie_name not in r.cookies


def test_login_round_trip(client):
    registered = register(client).json()
    client.post("/api/logout")

    other = new_client()
    r = other.post(
        "/api/login",
        json={"username": "Sarah.Martinez", "password": REALISTIC_USERS["default"]["password"]},
    )
    assert r.status_code == 200
    assert r.json() == registered
    assert other.get("/api/user").json()["id"] == registered["id"]


def test_login_wrong_password_is_generic_401(client):
    register(client)
    anon = new_client()

    wrong = anon.post("/api/login", json={"username": "sarah.martinez", "password": "nope"})
    unknown = anon.post("/api/login", json={"username": "ghost", "password": "nope"})

    assert wrong.status_code == 401
    assert unknown.status_code == 401
    assert wrong.json()["message"] == unknown.json()["message"]
    assert settings.session_cookie_name not in wrong.cookies
    assert anon.get("/api/user").status_code == 401


def test_login_malformed_body(client):
    r = client.post("/api/login", json={"username": "sarah.martinez"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_login_empty_credentials_is_401(client):
    register(client)
    anon = new_client()

    empty_password = anon.post("/api/login", json={"username": "sarah.martinez", "password": ""})
    empty_username = anon.post("/api/login", json={"username": "", "password": "nope"})

    assert empty_password.status_code == 401
    assert empty_username.status_code == 401
    assert empty_password.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert anon.get("/api/user").status_code == 401


def test_logout(client):
    register(client)
    r = client.post("/api/logout")
    assert r.status_code == 200
    assert r.json()["success"] is True

    assert client.get("/api/user").status_code == 401
    assert client.post("/api/logout").status_code == 401


def test_protected_routes_require_session(client):
    anon = client
    for method, path in [
        ("get", "/api/user"),
        ("post", "/api/logout"),
        ("post", "/api/fasts/start"),
        ("post", "/api/fasts/1/end"),
        ("get", "/api/fasts"),
        ("get", "/api/fasts/active"),
        ("post", "/api/fasts/1/meals"),
        ("get", "/api/fasts/1/meals"),
    ]:
        r = getattr(anon, method)(path)
        assert r.status_code == 401, path
        assert r.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


def test_forged_session_cookie_rejected(client):
    register(client)
    forged = new_client()
    forged.cookies.set(settings.session_cookie_name, "forged-token")
    assert forged.get("/api/user").status_code == 401


# =============================================================================
# FASTS AND MEALS
# =============================================================================


def test_start_fast_twice(client):
    register(client)

    first = client.post("/api/fasts/start")
    assert first.status_code == 201
    assert first.json()["isActive"] is True
    assert first.json()["endTime"] is None

    second = client.post("/api/fasts/start")
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "ALREADY_ACTIVE"

    assert len(client.get("/api/fasts").json()) == 1


def test_active_fast_endpoint(client):
    register(client)
    assert client.get("/api/fasts/active").json() is None

    fast = client.post("/api/fasts/start").json()
    assert client.get("/api/fasts/active").json()["id"] == fast["id"]

    client.post(f"/api/fasts/{fast['id']}/end")
    assert client.get("/api/fasts/active").json() is None


def test_full_fast_scenario(client, fake_clock):
    register(client)
    t0 = fake_clock.current

    fast = client.post("/api/fasts/start").json()
    assert client.post(f"/api/fasts/{fast['id']}/meals", json={"description": "eggs"}).status_code == 201
    assert client.post(f"/api/fasts/{fast['id']}/meals", json={"description": "salad"}).status_code == 201
    ended = client.post(f"/api/fasts/{fast['id']}/end", json={"note": "felt good"})
    assert ended.status_code == 200
    t1, t2, t3 = fake_clock.issued[1:4]
    assert t0 < t1 < t2 < t3

    fasts = client.get("/api/fasts").json()
    assert len(fasts) == 1
    assert fasts[0]["startTime"] == t0.isoformat() + "Z"
    assert fasts[0]["endTime"] == t3.isoformat() + "Z"
    assert fasts[0]["isActive"] is False
    assert fasts[0]["note"] == "felt good"
    assert fasts[0]["durationSeconds"] == int((t3 - t0).total_seconds())

    meals = client.get(f"/api/fasts/{fast['id']}/meals").json()
    assert [m["description"] for m in meals] == ["eggs", "salad"]
    assert [m["mealTime"] for m in meals] == [t1.isoformat() + "Z", t2.isoformat() + "Z"]
    assert all(m["fastId"] == fast["id"] for m in meals)


def test_timestamps_are_utc(client):
    register(client)
    fast = client.post("/api/fasts/start").json()
    meal = client.post(f"/api/fasts/{fast['id']}/meals", json={"description": "eggs"}).json()
    ended = client.post(f"/api/fasts/{fast['id']}/end").json()

    assert fast["startTime"].endswith("Z")
    assert meal["mealTime"].endswith("Z")
    assert ended["endTime"].endswith("Z")
    assert client.get("/api/health-check").json()["timestamp"].endswith("Z")
    assert new_client().get("/api/user").json()["timestamp"].endswith("Z")


def test_end_fast_without_note(client):
    register(client)
    fast = client.post("/api/fasts/start").json()

    r = client.post(f"/api/fasts/{fast['id']}/end")
    assert r.status_code == 200
    assert r.json()["note"] is None
    assert r.json()["isActive"] is False
    assert r.json()["endTime"] is not None


def test_end_fast_twice_rejected(client):
    register(client)
    fast = client.post("/api/fasts/start").json()
    client.post(f"/api/fasts/{fast['id']}/end", json={"note": "first"})

    r = client.post(f"/api/fasts/{fast['id']}/end", json={"note": "second"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "FAST_NOT_ACTIVE"
    assert client.get("/api/fasts").json()[0]["note"] == "first"


def test_fasts_listed_most_recent_first(client, fake_clock):
    register(client)
    ids = []
    for _ in range(3):
        fast = client.post("/api/fasts/start").json()
        client.post(f"/api/fasts/{fast['id']}/end")
        ids.append(fast["id"])

    assert [f["id"] for f in client.get("/api/fasts").json()] == list(reversed(ids))


def test_other_user_cannot_end_fast(client):
    register(client)
    fast = client.post("/api/fasts/start").json()

    intruder = new_client()
    register(intruder, profile_type="other")
    r = intruder.post(f"/api/fasts/{fast['id']}/end", json={"note": "mine now"})

    assert r.status_code == 403
    assert r.json()["error"]["code"] == "NOT_OWNER"
    active = client.get("/api/fasts").json()[0]
    assert active["isActive"] is True
    assert active["note"] is None


def test_other_user_cannot_touch_meals(client):
    register(client)
    fast = client.post("/api/fasts/start").json()
    client.post(f"/api/fasts/{fast['id']}/meals", json={"description": "eggs"})

    intruder = new_client()
    register(intruder, profile_type="other")

    assert intruder.post(f"/api/fasts/{fast['id']}/meals", json={"description": "x"}).status_code == 403
    assert intruder.get(f"/api/fasts/{fast['id']}/meals").status_code == 403
    assert intruder.get("/api/fasts").json() == []
    assert len(client.get(f"/api/fasts/{fast['id']}/meals").json()) == 1


def test_unknown_fast_is_404(client):
    register(client)
    assert client.post("/api/fasts/999/end").status_code == 404
    assert client.post("/api/fasts/999/meals", json={"description": "eggs"}).status_code == 404
    r = client.get("/api/fasts/999/meals")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_meal_validation(client):
    register(client)
    fast = client.post("/api/fasts/start").json()

    blank = client.post(f"/api/fasts/{fast['id']}/meals", json={"description": "   "})
    assert blank.status_code == 400
    assert blank.json()["error"]["code"] == "EMPTY_DESCRIPTION"

    missing = client.post(f"/api/fasts/{fast['id']}/meals", json={})
    assert missing.status_code == 400

    assert client.get(f"/api/fasts/{fast['id']}/meals").json() == []


def test_meal_on_ended_fast_rejected(client):
    register(client)
    fast = client.post("/api/fasts/start").json()
    client.post(f"/api/fasts/{fast['id']}/end")

    r = client.post(f"/api/fasts/{fast['id']}/meals", json={"description": "pizza"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "FAST_NOT_ACTIVE"


def test_non_integer_fast_id(client):
    register(client)
    r = client.get("/api/fasts/abc/meals")
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_running_fast_duration_grows(client, monkeypatch):
    register(client)
    fast = client.post("/api/fasts/start").json()

    from datetime import datetime

    later = datetime.fromisoformat(fast["startTime"].rstrip("Z")) + timedelta(hours=3)
    monkeypatch.setattr("domain.mappers.fast_mapper.utcnow", lambda: later)

    assert client.get("/api/fasts/active").json()["durationSeconds"] == 3 * 3600

from models import COMMUNITY, USERS


def register(client, username="alice", password="pw123", **profile):
    return client.post("/api/register", json={"username": username, "password": password, **profile})


def test_login_scenario(client):
    assert register(client).status_code == 200

    r = client.post("/api/login", json={"username": "alice", "password": "wrong"})
    assert r.status_code == 400
    assert r.get_json() == {"error": "Invalid credentials."}

    r = client.post("/api/login", json={"username": "alice", "password": "pw123"})
    assert r.status_code == 200
    body = r.get_json()
    assert body["points"] == 0
    assert "passwordHash" not in body
    assert "salt" not in body


def test_register_validation_and_conflict(client, store):
    r = client.post("/api/register", json={"username": "alice"})
    assert r.status_code == 400
    assert r.get_json() == {"error": "Username and password are required."}

    assert register(client).get_json() == {"message": "User registered successfully."}
    r = register(client, password="other")
    assert r.status_code == 400
    assert r.get_json() == {"error": "Username already exists."}
    assert len(store.load(USERS)) == 1


def test_register_without_body(client):
    r = client.post("/api/register", data="not json", content_type="text/plain")
    assert r.status_code == 400


def test_register_numeric_profile_fields(client):
    register(client, age=34, weight=70.5, gender="f")
    profile = client.get("/api/user/alice").get_json()
    assert profile["age"] == "34"
    assert profile["weight"] == "70.5"
    assert profile["gender"] == "f"
    assert profile["water"] == ""


def test_get_user(client):
    r = client.get("/api/user/alice")
    assert r.status_code == 404
    assert r.get_json() == {"error": "User not found."}

    register(client)
    r = client.get("/api/user/alice")
    assert r.status_code == 200
    assert r.get_json()["username"] == "alice"
    assert "salt" not in r.get_json()


def test_points(client):
    register(client)
    assert client.post("/api/user/alice/points", json={"points": 5}).get_json() == {"points": 5}
    assert client.post("/api/user/alice/points", json={"points": -2}).get_json() == {"points": 3}

    r = client.post("/api/user/alice/points", json={"points": "5"})
    assert r.status_code == 400
    assert r.get_json() == {"error": 'The "points" field must be a number.'}

    r = client.post("/api/user/alice/points", json={})
    assert r.status_code == 400

    r = client.post("/api/user/ghost/points", json={"points": 1})
    assert r.status_code == 404


def test_progress(client):
    r = client.post("/api/user/bob/progress", json={})
    assert r.status_code == 400
    assert r.get_json() == {"error": "Please provide steps or minutes."}

    r = client.post("/api/user/bob/progress", json={"steps": 500})
    assert r.status_code == 200
    assert r.get_json() == {"message": "Progress logged successfully."}

    entries = client.get("/api/user/bob/progress").get_json()
    assert len(entries) == 1
    assert entries[0]["steps"] == 500
    assert entries[0]["minutes"] is None

    assert client.get("/api/user/carol/progress").get_json() == []


def test_community(client, store):
    assert client.get("/api/community").get_json() == []

    r = client.post("/api/community", json={"username": "alice", "title": "No body"})
    assert r.status_code == 400
    assert r.get_json() == {"error": "Post must include a username and description."}
    assert store.load(COMMUNITY) == []

    r = client.post("/api/community", json={
        "username": "alice",
        "description": "Lunch walk",
        "duration": "20 min",
        "activityType": "walking",
    })
    assert r.status_code == 200
    posts = client.get("/api/community").get_json()
    assert len(posts) == 1
    assert posts[0]["activityType"] == "walking"


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_unknown_route_is_json(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert "error" in r.get_json()


def test_file_backed_app(file_client, file_store):
    register(file_client)
    assert file_store.load(USERS)[0]["username"] == "alice"
    r = file_client.post("/api/login", json={"username": "alice", "password": "pw123"})
    assert r.status_code == 200


def test_points_rejects_nan_and_infinity(client):
    register(client)
    client.post("/api/user/alice/points", json={"points": 4})
    for raw in ('{"points": NaN}', '{"points": Infinity}', '{"points": -Infinity}'):
        r = client.post("/api/user/alice/points", data=raw, content_type="application/json")
        assert r.status_code == 400
        assert r.get_json() == {"error": 'The "points" field must be a number.'}
    r = client.get("/api/user/alice")
    assert b"NaN" not in r.data
    assert r.get_json()["points"] == 4


def test_type_errors_name_the_field(client, store):
    r = register(client, gender=["f"])
    assert r.status_code == 400
    assert r.get_json() == {"error": 'Invalid value for "gender".'}
    assert store.load(USERS) == []

    r = client.post("/api/community", json={"username": "alice", "description": "Swim", "image": {"url": "x"}})
    assert r.status_code == 400
    assert r.get_json() == {"error": 'Invalid value for "image".'}
    assert store.load(COMMUNITY) == []

    r = client.post("/api/user/bob/progress", json={"steps": "lots"})
    assert r.status_code == 400
    assert r.get_json() == {"error": 'Invalid value for "steps".'}

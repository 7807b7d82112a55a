import pytest

from helpers import signup, create_user, post_tuit


def test_create_and_find_user(client):
    user = create_user(
        client, "bob", "pw",
        email="bob@example.com",
        account_type="ACADEMIC",
        location={"latitude": 48.1, "longitude": 11.5},
    )
    assert "password" not in user
    assert user["account_type"] == "ACADEMIC"
    assert user["location"] == {"latitude": 48.1, "longitude": 11.5}
    assert user["joined"]

    assert client.get(f"/api/users/{user['id']}").json()["username"] == "bob"
    assert client.get("/api/users/username/bob").json()["id"] == user["id"]
    assert [u["id"] for u in client.get("/api/users").json()] == [user["id"]]


def test_create_user_does_not_log_in(client):
    create_user(client, "bob")
    assert client.get("/api/auth/profile").status_code == 403


def test_unknown_user(client):
    response = client.get("/api/users/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "No such user."
    assert client.get("/api/users/username/ghost").status_code == 404


def test_duplicate_username(client):
    create_user(client, "bob")
    response = client.post("/api/users", json={"username": "bob", "password": "x"})
    assert response.status_code == 403
    assert response.json()["detail"] == "User already exists."


def test_invalid_user_payload_is_rejected(client):
    response = client.post("/api/users", json={"username": "", "password": "x"})
    assert response.status_code == 403
    assert response.json()["detail"].startswith("username:")

    response = client.post("/api/users", json={"username": "bob", "password": "x", "account_type": "ROBOT"})
    assert response.status_code == 403
    assert response.json()["detail"].startswith("account_type:")


def test_update_user(client):
    user = create_user(client, "bob", "old")
    response = client.put(f"/api/users/{user['id']}", json={"biography": "hi", "marital_status": "MARRIED"})
    assert response.status_code == 200
    assert response.json()["biography"] == "hi"
    assert response.json()["marital_status"] == "MARRIED"
    assert response.json()["username"] == "bob"


def test_update_password_is_rehashed(client):
    user = create_user(client, "bob", "old")
    client.put(f"/api/users/{user['id']}", json={"password": "new"})

    assert client.post("/api/auth/login", json={"username": "bob", "password": "old"}).status_code == 403
    assert client.post("/api/auth/login", json={"username": "bob", "password": "new"}).status_code == 200


def test_update_to_taken_username(client):
    create_user(client, "alice")
    bob = create_user(client, "bob")
    response = client.put(f"/api/users/{bob['id']}", json={"username": "alice"})
    assert response.status_code == 403
    assert response.json()["detail"] == "User already exists."


def test_update_unknown_user(client):
    assert client.put("/api/users/42", json={"biography": "x"}).status_code == 404


def test_update_strips_username(client):
    bob = create_user(client, "bob")
    response = client.put(f"/api/users/{bob['id']}", json={"username": "  bob2 "})
    assert response.status_code == 200
    assert response.json()["username"] == "bob2"
    assert client.get("/api/users/username/bob2").status_code == 200


def test_update_to_blank_username_is_rejected(client):
    bob = create_user(client, "bob")
    response = client.put(f"/api/users/{bob['id']}", json={"username": "   "})
    assert response.status_code == 403
    assert response.json()["detail"].startswith("username:")
    assert client.get(f"/api/users/{bob['id']}").json()["username"] == "bob"


def test_update_to_padded_taken_username(client):
    create_user(client, "alice")
    bob = create_user(client, "bob")
    response = client.put(f"/api/users/{bob['id']}", json={"username": " alice "})
    assert response.status_code == 403
    assert response.json()["detail"] == "User already exists."
    assert sorted(u["username"] for u in client.get("/api/users").json()) == ["alice", "bob"]


@pytest.mark.parametrize("field", ["username", "password", "account_type", "marital_status"])
def test_update_with_null_required_field_is_rejected(client, field):
    bob = create_user(client, "bob", "pw")
    response = client.put(f"/api/users/{bob['id']}", json={field: None})
    assert response.status_code == 403
    assert response.json()["detail"].startswith(f"{field}:")

    stored = client.get(f"/api/users/{bob['id']}").json()
    assert stored["username"] == "bob"
    assert stored["account_type"] == "PERSONAL"
    assert client.post("/api/auth/login", json={"username": "bob", "password": "pw"}).status_code == 200


def test_update_with_null_optional_field_clears_it(client):
    bob = create_user(client, "bob", biography="hello")
    response = client.put(f"/api/users/{bob['id']}", json={"biography": None})
    assert response.status_code == 200
    assert response.json()["biography"] is None


def test_profile_reflects_update_to_me(client):
    signup(client, "alice")
    client.put("/api/users/me", json={"first_name": "Alicia"})
    assert client.get("/api/auth/profile").json()["first_name"] == "Alicia"


def test_delete_user_by_username(client):
    create_user(client, "bob")
    assert client.delete("/api/users/username/bob").json() == {"deleted_count": 1}
    assert client.delete("/api/users/username/bob").json() == {"deleted_count": 0}
    assert client.get("/api/users/username/bob").status_code == 404


def test_delete_unknown_user_deletes_nothing(client):
    assert client.delete("/api/users/77").json() == {"deleted_count": 0}


def test_delete_user_removes_their_content_and_fixes_stats(client):
    alice = create_user(client, "alice")
    bob = create_user(client, "bob")
    carol = create_user(client, "carol")
    alice_tuit = post_tuit(client, alice["id"], "alice says")
    carol_tuit = post_tuit(client, carol["id"], "carol says")
    bob_tuit = post_tuit(client, bob["id"], "bob says")

    client.put(f"/api/users/{bob['id']}/likes/{alice_tuit['id']}")
    client.put(f"/api/users/{bob['id']}/dislikes/{carol_tuit['id']}")
    client.put(f"/api/users/{alice['id']}/likes/{bob_tuit['id']}")
    client.post(f"/api/users/{bob['id']}/bookmarks/{alice_tuit['id']}")
    client.post(f"/api/users/{alice['id']}/bookmarks/{bob_tuit['id']}")
    client.post(f"/api/users/{bob['id']}/follows/{alice['id']}")
    client.post(f"/api/users/{carol['id']}/follows/{bob['id']}")
    client.post(f"/api/users/{alice['id']}/messages/{bob['id']}", json={"message": "hey"})

    assert client.delete(f"/api/users/{bob['id']}").json() == {"deleted_count": 1}

    assert client.get(f"/api/tuits/{alice_tuit['id']}").json()["stats"] == {"likes": 0, "dislikes": 0}
    assert client.get(f"/api/tuits/{carol_tuit['id']}").json()["stats"] == {"likes": 0, "dislikes": 0}
    assert client.get(f"/api/tuits/{bob_tuit['id']}").status_code == 404
    assert client.get("/api/likes").json() == []
    assert client.get("/api/dislikes").json() == []
    assert client.get("/api/bookmarks").json() == []
    assert client.get("/api/follows").json() == []
    assert client.get(f"/api/users/{alice['id']}/messages/sent").json() == []
    assert [t["id"] for t in client.get("/api/tuits").json()] == [carol_tuit["id"], alice_tuit["id"]]


def test_delete_me_logs_out(client):
    signup(client, "alice")
    assert client.delete("/api/users/me").json() == {"deleted_count": 1}
    assert client.get("/api/auth/profile").status_code == 403


def test_session_of_deleted_user_is_dropped(client):
    alice = signup(client, "alice")
    assert client.delete("/api/users/username/alice").json() == {"deleted_count": 1}
    assert client.get("/api/auth/profile").status_code == 403
    assert client.get("/api/users/me").status_code == 403
    assert client.get(f"/api/users/{alice['id']}").status_code == 404

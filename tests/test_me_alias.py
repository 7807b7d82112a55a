import pytest

from helpers import signup, create_user, post_tuit

ME_ROUTES = [
    ("get", "/api/users/me"),
    ("put", "/api/users/me"),
    ("delete", "/api/users/me"),
    ("get", "/api/users/me/tuits"),
    ("post", "/api/users/me/tuits"),
    ("get", "/api/users/me/likes"),
    ("post", "/api/users/me/likes/1"),
    ("put", "/api/users/me/likes/1"),
    ("delete", "/api/users/me/likes/1"),
    ("get", "/api/users/me/dislikes"),
    ("put", "/api/users/me/dislikes/1"),
    ("get", "/api/users/me/follows"),
    ("get", "/api/users/me/followers"),
    ("post", "/api/users/1/follows/me"),
    ("get", "/api/users/me/bookmarks"),
    ("post", "/api/users/me/bookmarks/1"),
    ("get", "/api/users/me/messages/sent"),
    ("get", "/api/users/me/messages/received"),
    ("post", "/api/users/1/messages/me"),
]


def _call(client, method, url):
    if method in ("post", "put"):
        return getattr(client, method)(url, json={"tuit": "x", "message": "x"})
    return getattr(client, method)(url)


@pytest.mark.parametrize("method,url", ME_ROUTES)
def test_me_without_session_is_not_logged_in(client, method, url):
    create_user(client, "bob")
    response = _call(client, method, url)
    assert response.status_code == 403
    assert response.json()["detail"] == "No user is logged in."


def test_me_resolves_to_session_user(client):
    alice = signup(client, "alice")
    assert client.get("/api/users/me").json()["id"] == alice["id"]

    tuit = post_tuit(client, "me", "from me")
    assert tuit["posted_by"]["id"] == alice["id"]
    assert [t["id"] for t in client.get(f"/api/users/{alice['id']}/tuits").json()] == [tuit["id"]]


def test_non_numeric_user_id_is_rejected(client):
    response = client.get("/api/users/alice")
    assert response.status_code == 403
    assert response.json()["detail"] == 'uid: "alice" is not a valid identifier.'


def test_literal_me_is_not_looked_up_as_username(client):
    create_user(client, "me")
    assert client.get("/api/users/me").status_code == 403
    assert client.get("/api/users/username/me").status_code == 200

from helpers import create_user, post_tuit


def test_post_and_find_tuit(client):
    bob = create_user(client, "bob")
    tuit = post_tuit(client, bob["id"], "  first tuit  ")
    assert tuit["tuit"] == "first tuit"
    assert tuit["posted_by"]["username"] == "bob"
    assert tuit["stats"] == {"likes": 0, "dislikes": 0}
    assert tuit["posted_on"]

    assert client.get(f"/api/tuits/{tuit['id']}").json() == tuit


def test_tuits_are_listed_newest_first(client):
    bob = create_user(client, "bob")
    alice = create_user(client, "alice")
    first = post_tuit(client, bob["id"], "one")
    second = post_tuit(client, alice["id"], "two")
    third = post_tuit(client, bob["id"], "three")

    assert [t["id"] for t in client.get("/api/tuits").json()] == [third["id"], second["id"], first["id"]]
    assert [t["id"] for t in client.get(f"/api/users/{bob['id']}/tuits").json()] == [third["id"], first["id"]]


def test_empty_tuit_content(client):
    bob = create_user(client, "bob")
    for body in ({"tuit": "   "}, {"tuit": ""}, {}):
        response = client.post(f"/api/users/{bob['id']}/tuits", json=body)
        assert response.status_code == 403
        assert response.json()["detail"] == "Empty tuit content"
    assert client.get("/api/tuits").json() == []


def test_tuit_too_long(client):
    bob = create_user(client, "bob")
    response = client.post(f"/api/users/{bob['id']}/tuits", json={"tuit": "x" * 281})
    assert response.status_code == 403
    assert response.json()["detail"].startswith("tuit:")


def test_tuit_by_unknown_user(client):
    response = client.post("/api/users/12/tuits", json={"tuit": "hello"})
    assert response.status_code == 404
    assert response.json()["detail"] == "No such user."


def test_unknown_tuit(client):
    response = client.get("/api/tuits/5")
    assert response.status_code == 404
    assert response.json()["detail"] == "No such tuit."


def test_update_tuit(client):
    bob = create_user(client, "bob")
    tuit = post_tuit(client, bob["id"])
    response = client.put(f"/api/tuits/{tuit['id']}", json={"tuit": "edited"})
    assert response.status_code == 200
    assert response.json()["tuit"] == "edited"

    response = client.put(f"/api/tuits/{tuit['id']}", json={"tuit": " "})
    assert response.status_code == 403
    assert client.put("/api/tuits/99", json={"tuit": "x"}).status_code == 404


def test_delete_tuit_removes_reactions_and_bookmarks(client):
    bob = create_user(client, "bob")
    alice = create_user(client, "alice")
    tuit = post_tuit(client, bob["id"])
    client.put(f"/api/users/{alice['id']}/likes/{tuit['id']}")
    client.put(f"/api/users/{bob['id']}/dislikes/{tuit['id']}")
    client.post(f"/api/users/{alice['id']}/bookmarks/{tuit['id']}")

    assert client.delete(f"/api/tuits/{tuit['id']}").json() == {"deleted_count": 1}
    assert client.get(f"/api/tuits/{tuit['id']}").status_code == 404
    assert client.get("/api/likes").json() == []
    assert client.get("/api/dislikes").json() == []
    assert client.get(f"/api/users/{alice['id']}/bookmarks").json() == []
    assert client.delete(f"/api/tuits/{tuit['id']}").json() == {"deleted_count": 0}

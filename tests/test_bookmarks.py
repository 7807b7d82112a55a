from helpers import signup, create_user, post_tuit


def test_bookmark_and_list(client):
    bob = create_user(client, "bob")
    alice = create_user(client, "alice")
    first = post_tuit(client, bob["id"], "first")
    second = post_tuit(client, bob["id"], "second")

    bookmark = client.post(f"/api/users/{alice['id']}/bookmarks/{first['id']}")
    assert bookmark.status_code == 200
    assert bookmark.json()["bookmarked_tuit_id"] == first["id"]
    client.post(f"/api/users/{alice['id']}/bookmarks/{second['id']}")

    saved = client.get(f"/api/users/{alice['id']}/bookmarks").json()
    assert [t["id"] for t in saved] == [second["id"], first["id"]]
    assert saved[0]["posted_by"]["username"] == "bob"
    assert len(client.get("/api/bookmarks").json()) == 2


def test_bookmark_twice_keeps_one_record(client):
    bob = create_user(client, "bob")
    tuit = post_tuit(client, bob["id"])
    client.post(f"/api/users/{bob['id']}/bookmarks/{tuit['id']}")
    client.post(f"/api/users/{bob['id']}/bookmarks/{tuit['id']}")
    assert len(client.get("/api/bookmarks").json()) == 1


def test_unbookmark(client):
    bob = create_user(client, "bob")
    tuit = post_tuit(client, bob["id"])
    client.post(f"/api/users/{bob['id']}/bookmarks/{tuit['id']}")
    assert client.delete(f"/api/users/{bob['id']}/bookmarks/{tuit['id']}").json() == {"deleted_count": 1}
    assert client.get(f"/api/users/{bob['id']}/bookmarks").json() == []


def test_bookmark_unknown_tuit_or_user(client):
    bob = create_user(client, "bob")
    tuit = post_tuit(client, bob["id"])
    assert client.post(f"/api/users/{bob['id']}/bookmarks/999").status_code == 404
    assert client.post(f"/api/users/999/bookmarks/{tuit['id']}").json()["detail"] == "No such user."


def test_bookmark_as_me(client):
    signup(client, "alice")
    bob = create_user(client, "bob")
    tuit = post_tuit(client, bob["id"])
    client.post(f"/api/users/me/bookmarks/{tuit['id']}")
    assert [t["id"] for t in client.get("/api/users/me/bookmarks").json()] == [tuit["id"]]

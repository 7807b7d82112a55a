import pytest
from sqlalchemy.exc import IntegrityError

from helpers import signup, create_user, post_tuit
from src.reactions.service import ReactionService


@pytest.fixture()
def setup(client):
    author = create_user(client, "author")
    reader = create_user(client, "reader")
    tuit = post_tuit(client, author["id"], "react to me")
    return author, reader, tuit


def _stats(client, tid):
    return client.get(f"/api/tuits/{tid}").json()["stats"]


def test_toggle_like_twice_returns_to_unliked(client, setup):
    _, reader, tuit = setup
    url = f"/api/users/{reader['id']}/likes/{tuit['id']}"

    first = client.put(url).json()
    assert first["liked"] is True
    assert first["stats"] == {"likes": 1, "dislikes": 0}

    second = client.put(url).json()
    assert second["liked"] is False
    assert second["stats"] == {"likes": 0, "dislikes": 0}
    assert client.get("/api/likes").json() == []
    assert client.get(f"/api/users/{reader['id']}/likes").json() == []
    assert client.get(f"/api/tuits/likes/{tuit['id']}").json() == []
    assert _stats(client, tuit["id"]) == {"likes": 0, "dislikes": 0}


def test_like_clears_existing_dislike(client, setup):
    _, reader, tuit = setup
    client.put(f"/api/users/{reader['id']}/dislikes/{tuit['id']}")
    assert _stats(client, tuit["id"]) == {"likes": 0, "dislikes": 1}

    result = client.put(f"/api/users/{reader['id']}/likes/{tuit['id']}").json()
    assert result == {
        "tuit_id": tuit["id"],
        "liked": True,
        "disliked": False,
        "stats": {"likes": 1, "dislikes": 0},
    }
    assert client.get("/api/dislikes").json() == []


def test_dislike_clears_existing_like(client, setup):
    _, reader, tuit = setup
    client.put(f"/api/users/{reader['id']}/likes/{tuit['id']}")
    result = client.put(f"/api/users/{reader['id']}/dislikes/{tuit['id']}").json()
    assert result["liked"] is False
    assert result["disliked"] is True
    assert result["stats"] == {"likes": 0, "dislikes": 1}


def test_toggle_dislike_twice(client, setup):
    _, reader, tuit = setup
    url = f"/api/users/{reader['id']}/dislikes/{tuit['id']}"
    client.put(url)
    assert len(client.get(f"/api/users/{reader['id']}/dislikes").json()) == 1
    result = client.put(url).json()
    assert result["disliked"] is False
    assert result["stats"] == {"likes": 0, "dislikes": 0}
    assert client.get(f"/api/users/{reader['id']}/dislikes").json() == []
    assert client.get("/api/dislikes").json() == []


def test_post_like_is_idempotent_and_delete_unlikes(client, setup):
    _, reader, tuit = setup
    url = f"/api/users/{reader['id']}/likes/{tuit['id']}"

    assert client.post(url).json()["liked"] is True
    assert client.post(url).json()["stats"]["likes"] == 1
    assert len(client.get("/api/likes").json()) == 1

    assert client.delete(url).json()["liked"] is False
    assert client.delete(url).json()["stats"]["likes"] == 0
    assert client.get(f"/api/users/{reader['id']}/likes").json() == []


def test_post_dislike_and_undislike(client, setup):
    _, reader, tuit = setup
    url = f"/api/users/{reader['id']}/dislikes/{tuit['id']}"
    assert client.post(url).json()["disliked"] is True
    assert client.post(url).json()["stats"]["dislikes"] == 1
    assert client.delete(url).json()["stats"]["dislikes"] == 0
    assert client.get(f"/api/users/{reader['id']}/dislikes").json() == []


def test_stats_match_live_counts(client, setup):
    author, reader, tuit = setup
    third = create_user(client, "third")
    tid = tuit["id"]

    client.put(f"/api/users/{author['id']}/likes/{tid}")
    client.put(f"/api/users/{reader['id']}/likes/{tid}")
    client.put(f"/api/users/{third['id']}/dislikes/{tid}")
    assert _stats(client, tid) == {"likes": 2, "dislikes": 1}

    client.put(f"/api/users/{third['id']}/likes/{tid}")
    assert _stats(client, tid) == {"likes": 3, "dislikes": 0}

    likers = client.get(f"/api/tuits/likes/{tid}").json()
    assert sorted(u["username"] for u in likers) == ["author", "reader", "third"]
    assert all("password" not in u for u in likers)


def test_reaction_unknown_tuit(client, setup):
    _, reader, _ = setup
    response = client.put(f"/api/users/{reader['id']}/likes/404")
    assert response.status_code == 404
    assert response.json()["detail"] == "No such tuit."


def test_reaction_unknown_user(client, setup):
    _, _, tuit = setup
    response = client.put(f"/api/users/404/dislikes/{tuit['id']}")
    assert response.status_code == 404
    assert response.json()["detail"] == "No such user."


def test_liked_and_disliked_tuit_lists(client, setup):
    author, reader, tuit = setup
    other = post_tuit(client, author["id"], "another")
    client.put(f"/api/users/{reader['id']}/likes/{tuit['id']}")
    client.put(f"/api/users/{reader['id']}/dislikes/{other['id']}")

    liked = client.get(f"/api/users/{reader['id']}/likes").json()
    assert [t["id"] for t in liked] == [tuit["id"]]
    assert liked[0]["posted_by"]["username"] == "author"
    assert liked[0]["stats"]["likes"] == 1

    disliked = client.get(f"/api/users/{reader['id']}/dislikes").json()
    assert [t["id"] for t in disliked] == [other["id"]]
    assert [u["id"] for u in client.get(f"/api/tuits/dislikes/{other['id']}").json()] == [reader["id"]]


def test_single_like_lookup(client, setup):
    _, reader, tuit = setup
    url = f"/api/users/{reader['id']}/likes/{tuit['id']}"
    assert client.get(url).json() is None

    client.put(url)
    like = client.get(url).json()
    assert like["tuit_id"] == tuit["id"]
    assert like["liked_by_id"] == reader["id"]
    assert client.get(f"/api/users/{reader['id']}/dislikes/{tuit['id']}").json() is None


def test_like_as_me(client, setup):
    _, _, tuit = setup
    me = signup(client, "me-user")
    result = client.put(f"/api/users/me/likes/{tuit['id']}").json()
    assert result["liked"] is True
    assert client.get(f"/api/users/{me['id']}/likes/{tuit['id']}").json()["liked_by_id"] == me["id"]


def test_duplicate_like_rows_are_rejected_by_the_database(client, setup, run_db):
    # The toggle locks the tuit row for the whole read-modify-write where the
    # backend supports it (SQLite has no row locks). The unique constraint on
    # (tuit, user) is what rules out a second like row from interleaved
    # requests, so a duplicate insert must fail instead of double counting.
    _, reader, tuit = setup
    service = ReactionService()

    async def insert_twice(db):
        await service.likes.create(reader["id"], tuit["id"], db)
        await service.likes.create(reader["id"], tuit["id"], db)

    with pytest.raises(IntegrityError):
        run_db(insert_twice)

    assert client.get("/api/likes").json() == []


def test_service_toggle_runs_in_one_transaction(client, setup, run_db):
    _, reader, tuit = setup
    service = ReactionService()

    result = run_db(lambda db: service.toggle_like(reader["id"], tuit["id"], db))
    assert result.liked is True
    assert result.stats.likes == 1

    result = run_db(lambda db: service.toggle_like(reader["id"], tuit["id"], db))
    assert result.liked is False
    assert run_db(lambda db: service.likes.count_for_target(tuit["id"], db)) == 0

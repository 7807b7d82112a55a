"""Shared request helpers for the API tests"""


def signup(client, username="alice", password="secret", **fields):
    payload = {"username": username, "password": password, **fields}
    response = client.post("/api/auth/signup", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def create_user(client, username="bob", password="secret", **fields):
    payload = {"username": username, "password": password, **fields}
    response = client.post("/api/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def post_tuit(client, uid, text="hello tuiter"):
    response = client.post(f"/api/users/{uid}/tuits", json={"tuit": text})
    assert response.status_code == 201, response.text
    return response.json()

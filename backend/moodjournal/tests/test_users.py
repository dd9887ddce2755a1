"""
Tests for current-user account routes.
"""


def test_get_me(client, auth_headers):
    headers = auth_headers("me@example.com")
    response = client.get("/users/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["email"] == "me@example.com"


def test_change_password(client, auth_headers):
    headers = auth_headers("change@example.com", "oldpass1")

    response = client.put(
        "/users/me/password",
        json={"current_password": "oldpass1", "new_password": "newpass2"},
        headers=headers
    )
    assert response.status_code == 200

    old_login = client.post("/login", json={"email": "change@example.com", "password": "oldpass1"})
    new_login = client.post("/login", json={"email": "change@example.com", "password": "newpass2"})
    assert old_login.status_code == 400
    assert new_login.status_code == 200


def test_change_password_wrong_current(client, auth_headers):
    headers = auth_headers("wrong@example.com", "oldpass1")
    response = client.put(
        "/users/me/password",
        json={"current_password": "guess123", "new_password": "newpass2"},
        headers=headers
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Current password is incorrect"}

from conftest import create_category, register


def test_list_users_hides_password(client):
    work = create_category(client, "Work")
    register(client, email="a@example.com", category_ids=[work])
    register(client, email="b@example.com")

    response = client.get("/api/users")
    assert response.status_code == 200
    users = response.json()
    assert [u["email"] for u in users] == ["a@example.com", "b@example.com"]
    for user in users:
        assert set(user) == {"id", "email", "createdAt", "categories"}
    assert users[0]["categories"] == [{"id": work, "name": "Work"}]


def test_list_users_store_failure(client, broken_store):
    response = client.get("/api/users")
    assert response.status_code == 500
    assert response.json() == {"error": "Could not fetch the list of users."}

from conftest import auth_headers, create_category, register

IN_USE = {"error": "Could not delete the category. Make sure it exists and is not in use."}


def test_create_category(client):
    response = client.post("/api/categories", json={"name": "Work"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "name": "Work"}


def test_duplicate_category_name_is_rejected(client):
    client.post("/api/categories", json={"name": "Work"})
    response = client.post("/api/categories", json={"name": "Work"})
    assert response.status_code == 400
    assert response.json() == {"error": "A category with this name already exists."}


def test_list_categories(client):
    assert client.get("/api/categories").json() == []
    create_category(client, "Work")
    create_category(client, "Home")
    assert [c["name"] for c in client.get("/api/categories").json()] == ["Work", "Home"]


def test_delete_unreferenced_category_then_it_is_gone(client):
    category_id = create_category(client, "Work")

    response = client.delete(f"/api/categories/{category_id}")
    assert response.status_code == 204
    assert response.content == b""

    second = client.delete(f"/api/categories/{category_id}")
    assert second.status_code == 404
    assert second.json() == IN_USE
    assert client.get("/api/categories").json() == []


def test_delete_category_used_by_task_fails(client):
    category_id = create_category(client, "Work")
    client.post("/api/tasks", json={"title": "Write report", "categoryIds": [category_id]})

    response = client.delete(f"/api/categories/{category_id}")
    assert response.status_code == 404
    assert response.json() == IN_USE
    assert len(client.get("/api/categories").json()) == 1


def test_delete_category_used_by_user_fails(client):
    category_id = create_category(client, "Work")
    register(client, category_ids=[category_id])

    assert client.delete(f"/api/categories/{category_id}").status_code == 404


def test_category_can_be_deleted_once_released(client, token):
    category_id = create_category(client, "Work")
    task_id = client.post(
        "/api/tasks", json={"title": "Write report", "categoryIds": [category_id]}
    ).json()["id"]
    client.post(
        "/api/profile/categories", json={"categoryIds": [category_id]}, headers=auth_headers(token)
    )

    client.delete(f"/api/tasks/{task_id}")
    client.post("/api/profile/categories", json={"categoryIds": []}, headers=auth_headers(token))

    assert client.delete(f"/api/categories/{category_id}").status_code == 204


def test_delete_category_with_non_numeric_id_is_not_found(client):
    response = client.delete("/api/categories/abc")
    assert response.status_code == 404
    assert response.json() == IN_USE

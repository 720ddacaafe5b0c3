from sqlmodel import select

from aralchi.models import CategoryTaskLink
from conftest import create_category


def test_create_task_with_categories(client):
    work = create_category(client, "Work")
    urgent = create_category(client, "Urgent")

    response = client.post("/api/tasks", json={"title": "Ship it", "categoryIds": [work, urgent]})
    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Ship it"
    assert {c["name"] for c in body["categories"]} == {"Work", "Urgent"}


def test_create_task_requires_category_array(client):
    response = client.post("/api/tasks", json={"title": "Ship it", "categoryIds": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "categoryIds must be an array."}

    missing = client.post("/api/tasks", json={"title": "Ship it"})
    assert missing.status_code == 400


def test_create_task_with_unknown_category_creates_nothing(client):
    work = create_category(client, "Work")

    response = client.post("/api/tasks", json={"title": "Ship it", "categoryIds": [work, 42]})
    assert response.status_code == 400
    assert response.json() == {"error": "Could not create the task. Check the category IDs."}
    assert client.get("/api/tasks").json() == []


def test_list_tasks_includes_categories(client):
    work = create_category(client, "Work")
    client.post("/api/tasks", json={"title": "First", "categoryIds": [work]})
    client.post("/api/tasks", json={"title": "Second", "categoryIds": []})

    tasks = client.get("/api/tasks").json()
    assert [t["title"] for t in tasks] == ["First", "Second"]
    assert tasks[0]["categories"] == [{"id": work, "name": "Work"}]
    assert tasks[1]["categories"] == []


def test_delete_task_removes_join_rows(client, db_session):
    work = create_category(client, "Work")
    task_id = client.post("/api/tasks", json={"title": "Ship it", "categoryIds": [work]}).json()["id"]

    response = client.delete(f"/api/tasks/{task_id}")
    assert response.status_code == 204

    again = client.delete(f"/api/tasks/{task_id}")
    assert again.status_code == 404
    assert again.json() == {"error": "Task not found."}

    assert db_session.exec(select(CategoryTaskLink)).all() == []


def test_delete_task_with_non_numeric_id_is_not_found(client):
    response = client.delete("/api/tasks/abc")
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found."}

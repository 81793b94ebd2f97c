from __future__ import annotations

from datetime import date, timedelta

from task_tracker.domain.task_models import Task
from task_tracker.infra.task_store_memory import InMemoryTaskStore


def _payload(**kw) -> dict:
    body = {"title": "Report", "assignee": "Alice", "day": 10, "month": 5, "year": 2025, "type": "Work", "priority": "high"}
    body.update(kw)
    return body


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_create_and_get(client, store: InMemoryTaskStore) -> None:
    res = client.post("/api/tasks", json=_payload())
    assert res.status_code == 201
    body = res.json()
    assert body["title"] == "Report"
    assert body["due_date"] == "2025-05-10"
    assert body["priority"] == "high"
    assert body["completed"] is False
    assert store.total_count() == 1

    assert client.get(f"/api/tasks/{body['id']}").json()["title"] == "Report"


def test_missing_title_is_422(client, store: InMemoryTaskStore) -> None:
    res = client.post("/api/tasks", json=_payload(title="   "))
    assert res.status_code == 422
    assert res.json()["kind"] == "missing_title"
    assert store.total_count() == 0


def test_invalid_date_is_422(client) -> None:
    res = client.post("/api/tasks", json=_payload(day=31, month=4))
    assert res.status_code == 422
    assert res.json() == {"kind": "invalid_date", "detail": "That date is not valid."}


def test_unknown_priority_rejected(client, store: InMemoryTaskStore) -> None:
    res = client.post("/api/tasks", json=_payload(priority="urgent"))
    assert res.status_code == 422
    assert store.total_count() == 0


def test_quick_add(client) -> None:
    assert client.post("/api/tasks/quick", json={"title": "  "}).json() == {"added": False, "task": None}
    body = client.post("/api/tasks/quick", json={"title": "Buy milk"}).json()
    assert body["added"] is True
    assert body["task"]["priority"] == "medium"


def test_list_with_filter_and_views(client, store: InMemoryTaskStore) -> None:
    overdue = Task(title="late", due_date=date.today() - timedelta(days=1))
    done = Task(title="done")
    store.add(overdue)
    store.add(done)
    store.mark_complete(done)

    items = client.get("/api/tasks").json()
    assert [i["task"]["title"] for i in items] == ["late", "done"]
    assert [i["urgency"] for i in items] == ["overdue", "done"]
    assert items[1]["label"] == "✔ [MEDIUM] done"

    pending = client.get("/api/tasks", params={"filter": "pending"}).json()
    assert [i["task"]["title"] for i in pending] == ["late"]
    assert client.get("/api/tasks", params={"filter": "bogus"}).status_code == 422


def test_complete_edit_keeps_completed(client) -> None:
    task_id = client.post("/api/tasks", json=_payload()).json()["id"]

    assert client.post(f"/api/tasks/{task_id}/complete").json()["completed"] is True

    res = client.put(f"/api/tasks/{task_id}", json=_payload(title="Renamed", no_due_date=True))
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Renamed"
    assert body["due_date"] is None
    assert body["completed"] is True


def test_rejected_edit_leaves_task(client) -> None:
    task_id = client.post("/api/tasks", json=_payload()).json()["id"]
    res = client.put(f"/api/tasks/{task_id}", json=_payload(title="New", day=29, month=2, year=2023))
    assert res.status_code == 422
    assert client.get(f"/api/tasks/{task_id}").json()["title"] == "Report"


def test_draft_prefill(client) -> None:
    task_id = client.post("/api/tasks", json=_payload()).json()["id"]
    draft = client.get(f"/api/tasks/{task_id}/draft").json()
    assert (draft["day"], draft["month"], draft["year"]) == (10, 5, 2025)
    assert draft["no_due_date"] is False


def test_delete(client, store: InMemoryTaskStore) -> None:
    task_id = client.post("/api/tasks", json=_payload()).json()["id"]
    assert client.delete(f"/api/tasks/{task_id}").json() == {"deleted": True, "id": task_id}
    assert store.total_count() == 0
    assert client.delete(f"/api/tasks/{task_id}").status_code == 404


def test_unknown_id_is_404(client) -> None:
    assert client.get("/api/tasks/nope").status_code == 404
    assert client.post("/api/tasks/nope/complete").status_code == 404
    assert client.put("/api/tasks/nope", json=_payload()).status_code == 404


def test_stats_and_suggestions(client, store: InMemoryTaskStore) -> None:
    assert client.get("/api/tasks/stats").json()["percent"] == 0.0

    a = store.add_title("A")
    store.add_title("B")
    store.mark_complete(a)
    assert client.get("/api/tasks/stats").json() == {"total": 2, "completed": 1, "remaining": 1, "percent": 50.0}

    suggestions = client.get("/api/tasks/suggestions").json()
    assert "Work" in suggestions["types"]
    assert date.today().year in suggestions["years"]


def test_request_id_echoed(client) -> None:
    res = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert res.headers["X-Request-ID"] == "abc-123"


def test_home_page(client, store: InMemoryTaskStore) -> None:
    assert "No tasks yet." in client.get("/").text

    t = store.add_title("Visible")
    store.mark_complete(t)
    store.add_title("Hidden")

    page = client.get("/", params={"filter": "completed"}).text
    assert "✔ [MEDIUM] Visible" in page
    assert "Hidden" not in page
    assert "task-done" in page
    assert "Total: 2 | Completed: 1 | Remaining: 1" in page
    assert "50.0%" in page

"""Tests for the /students endpoints."""

from fastapi.testclient import TestClient


def test_root_liveness(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Attendance System Backend is running!"


def test_list_students_empty(client: TestClient):
    response = client.get("/students")
    assert response.status_code == 200
    assert response.json() == []


def test_create_student(client: TestClient):
    response = client.post("/students", json={"name": "Amit", "roll_number": "101"})
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Amit"
    assert body["roll_number"] == "101"
    assert isinstance(body["student_id"], int)
    assert body["student_id"] > 0


def test_student_ids_are_unique(client: TestClient):
    ids = set()
    for idx in range(5):
        response = client.post(
            "/students", json={"name": f"Student {idx}", "roll_number": str(200 + idx)}
        )
        assert response.status_code == 201
        ids.add(response.json()["student_id"])
    assert len(ids) == 5


def test_list_includes_created_student(client: TestClient, amit: dict):
    client.post("/students", json={"name": "Priya", "roll_number": "102"})
    students = client.get("/students").json()
    matches = [s for s in students if s["name"] == "Amit" and s["roll_number"] == "101"]
    assert matches == [amit]


def test_list_students_ordered_by_id(client: TestClient):
    for name, roll in [("C", "3"), ("A", "1"), ("B", "2")]:
        client.post("/students", json={"name": name, "roll_number": roll})
    ids = [s["student_id"] for s in client.get("/students").json()]
    assert ids == sorted(ids)
    assert len(ids) == 3


def test_create_student_missing_field(client: TestClient):
    response = client.post("/students", json={"name": "Amit"})
    assert response.status_code == 422
    assert client.get("/students").json() == []


def test_update_student(client: TestClient, amit: dict):
    response = client.put(
        f"/students/{amit['student_id']}", json={"name": "Amit Kumar", "roll_number": "111"}
    )
    assert response.status_code == 200
    assert response.json() == {
        "student_id": amit["student_id"],
        "name": "Amit Kumar",
        "roll_number": "111",
    }
    assert client.get("/students").json() == [response.json()]


def test_update_student_only_name(client: TestClient, amit: dict):
    response = client.put(f"/students/{amit['student_id']}", json={"name": "Amit K"})
    assert response.status_code == 200
    assert response.json()["roll_number"] == "101"


def test_update_student_null_name_fails(client: TestClient, amit: dict):
    response = client.put(f"/students/{amit['student_id']}", json={"name": None})
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to update student"}
    assert client.get("/students").json() == [amit]


def test_update_missing_student(client: TestClient):
    for body in ({"name": "Ghost", "roll_number": "0"}, {}, {"unrelated": 1}):
        response = client.put("/students/999999", json=body)
        assert response.status_code == 404
        assert response.json() == {"detail": "Student not found"}

    response = client.put("/students/999999")
    assert response.status_code == 404


def test_delete_student(client: TestClient, amit: dict):
    response = client.delete(f"/students/{amit['student_id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Student deleted successfully", "deleted": amit}
    assert client.get("/students").json() == []


def test_delete_missing_student(client: TestClient):
    response = client.delete("/students/999999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Student not found"}


def test_delete_student_twice(client: TestClient, amit: dict):
    assert client.delete(f"/students/{amit['student_id']}").status_code == 200
    assert client.delete(f"/students/{amit['student_id']}").status_code == 404


def test_delete_student_removes_attendance(client: TestClient, amit: dict):
    client.post(
        "/attendance",
        json={"student_id": amit["student_id"], "date": "2024-01-01", "status": "present"},
    )
    response = client.delete(f"/students/{amit['student_id']}")
    assert response.status_code == 200
    assert client.get("/attendance").json() == []


def test_cors_any_origin(client: TestClient):
    response = client.get("/students", headers={"Origin": "http://frontend.example"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"

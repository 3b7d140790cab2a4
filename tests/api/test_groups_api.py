def test_create_update_and_delete_group(client):
    created = client.post("/api/groups", json={"name": "Python Basics", "schedule": "Tue - 2:00 PM"})
    assert created.status_code == 201
    group = created.json()
    assert group["capacity"] == 30
    assert group["status"] == "active"
    assert group["description"] is None

    updated = client.put(f"/api/groups/{group['id']}", json={"status": "inactive", "capacity": 12})
    assert updated.status_code == 200
    assert updated.json()["status"] == "inactive"
    assert updated.json()["capacity"] == 12
    assert updated.json()["schedule"] == "Tue - 2:00 PM"

    deleted = client.delete(f"/api/groups/{group['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Group deleted successfully"}
    assert group["id"] not in [g["id"] for g in client.get("/api/groups").json()]


def test_invalid_group_body_is_bad_request(client):
    response = client.post("/api/groups", json={"capacity": -1})

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid request data"}


def test_missing_group_is_not_found(client):
    before = client.get("/api/groups").json()

    assert client.put("/api/groups/missing", json={"name": "X"}).status_code == 404
    assert client.delete("/api/groups/missing").status_code == 404
    assert client.get("/api/groups").json() == before


def test_deleting_group_detaches_students(client, demo_student):
    response = client.delete(f"/api/groups/{demo_student['groupId']}")
    assert response.status_code == 200

    student = next(s for s in client.get("/api/students").json() if s["id"] == demo_student["id"])
    assert student["groupId"] is None
    assert student["group"] is None

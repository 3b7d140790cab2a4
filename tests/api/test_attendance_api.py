def _mark(client, student, status, date):
    return client.post(
        "/api/attendance",
        json={"studentId": student["id"], "groupId": student["groupId"], "date": date, "status": status},
    )


def test_record_filter_and_update_attendance(client, demo_student):
    first = _mark(client, demo_student, "present", "2024-09-02T10:00:00")
    assert first.status_code == 201
    assert first.json()["status"] == "present"
    assert first.json()["notes"] is None
    _mark(client, demo_student, "late", "2024-09-04T10:00:00")

    by_student = client.get("/api/attendance", params={"studentId": demo_student["id"]}).json()
    by_group = client.get("/api/attendance", params={"groupId": demo_student["groupId"]}).json()
    assert len(by_student) == len(by_group) == 2
    assert client.get("/api/attendance", params={"groupId": "other"}).json() == []

    updated = client.put(f"/api/attendance/{first.json()['id']}", json={"status": "absent", "notes": "Flu"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "absent"
    assert updated.json()["notes"] == "Flu"


def test_invalid_status_is_bad_request(client, demo_student):
    response = _mark(client, demo_student, "asleep", "2024-09-02T10:00:00")

    assert response.status_code == 400


def test_unknown_group_is_not_found(client, demo_student):
    response = _mark(client, {**demo_student, "groupId": "missing"}, "present", "2024-09-02T10:00:00")

    assert response.status_code == 404


def test_update_missing_record_is_not_found(client):
    assert client.put("/api/attendance/missing", json={"status": "late"}).status_code == 404


def test_offset_dates_are_stored_in_utc(client, demo_student):
    created = _mark(client, demo_student, "present", "2024-09-02T10:00:00+05:00")

    assert created.status_code == 201
    assert created.json()["date"] == "2024-09-02T05:00:00"

    updated = client.put(f"/api/attendance/{created.json()['id']}", json={"date": "2024-09-03T08:30:00-02:00"})
    assert updated.json()["date"] == "2024-09-03T10:30:00"

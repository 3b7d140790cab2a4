def _award(client, student, admin, medal_type="gold", reason="Top score"):
    return client.post(
        "/api/medals",
        json={
            "studentId": student["id"],
            "type": medal_type,
            "reason": reason,
            "awardedBy": admin["id"],
        },
    )


def _balances(client, student_id):
    student = next(s for s in client.get("/api/students").json() if s["id"] == student_id)
    return student["goldMedals"], student["silverMedals"], student["bronzeMedals"]


def test_award_and_revoke_round_trip(client, demo_student, admin_user):
    response = _award(client, demo_student, admin_user)
    assert response.status_code == 201
    medal = response.json()
    assert medal["type"] == "gold"
    assert medal["awardedBy"] == admin_user["id"]
    assert _balances(client, demo_student["id"]) == (4, 5, 8)

    revoked = client.delete(f"/api/medals/{medal['id']}")
    assert revoked.status_code == 200
    assert revoked.json() == {"message": "Medal revoked successfully"}
    assert _balances(client, demo_student["id"]) == (3, 5, 8)


def test_list_inlines_student_user_and_awarder(client, demo_student, admin_user):
    _award(client, demo_student, admin_user, "silver", "Helped a classmate")

    medals = client.get("/api/medals", params={"studentId": demo_student["id"]}).json()

    assert len(medals) == 1
    medal = medals[0]
    assert medal["reason"] == "Helped a classmate"
    assert medal["student"]["studentId"] == "TIT-2024-001"
    assert medal["user"]["name"] == "Student User"
    assert medal["awarder"]["name"] == "Admin User"
    assert client.get("/api/medals", params={"studentId": "someone-else"}).json() == []


def test_invalid_medal_type_is_bad_request(client, demo_student, admin_user):
    response = _award(client, demo_student, admin_user, medal_type="platinum")

    assert response.status_code == 400
    assert _balances(client, demo_student["id"]) == (3, 5, 8)


def test_award_to_unknown_student_is_not_found(client, admin_user):
    response = _award(client, {"id": "missing"}, admin_user)

    assert response.status_code == 404
    assert client.get("/api/medals").json() == []


def test_revoke_unknown_medal_is_not_found(client, demo_student):
    assert client.delete("/api/medals/missing").status_code == 404
    assert _balances(client, demo_student["id"]) == (3, 5, 8)

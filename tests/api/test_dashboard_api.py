def test_stats_on_seeded_store(client):
    response = client.get("/api/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalGroups": 1,
        "totalStudents": 1,
        "medalsAwarded": 0,
        "totalMedals": 0,
        "totalAttendance": 0,
        "attendanceRate": "0%",
    }


def test_rate_for_three_present_out_of_four(client, demo_student, admin_user):
    for day, status in enumerate(["present", "present", "absent", "present"], start=2):
        client.post(
            "/api/attendance",
            json={
                "studentId": demo_student["id"],
                "groupId": demo_student["groupId"],
                "date": f"2024-09-0{day}T10:00:00",
                "status": status,
            },
        )
    client.post(
        "/api/medals",
        json={"studentId": demo_student["id"], "type": "bronze", "reason": "Streak", "awardedBy": admin_user["id"]},
    )

    stats = client.get("/api/dashboard/stats").json()

    assert stats["attendanceRate"] == "75%"
    assert stats["totalAttendance"] == 4
    assert stats["medalsAwarded"] == 1

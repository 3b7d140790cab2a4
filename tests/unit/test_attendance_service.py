from datetime import datetime

import pytest

from school_crm.models import AttendanceStatus
from school_crm.services import attendance_service, group_service, student_service
from school_crm.services.attendance_service import AttendanceRuleViolation


@pytest.fixture
def sheet(session, student, group):
    other_group = group_service.create_group(session, name="Geometry")
    other_student = student_service.create_student(session, user_id=student.user_id, student_id="SPR-2024-002")
    records = [
        attendance_service.create_attendance(
            session,
            student_id=student.id,
            group_id=group.id,
            date=datetime(2024, 9, 2, 9, 0),
            status=AttendanceStatus.PRESENT,
        ),
        attendance_service.create_attendance(
            session,
            student_id=other_student.id,
            group_id=other_group.id,
            date=datetime(2024, 9, 3, 9, 0),
            status=AttendanceStatus.ABSENT,
            notes="Sick",
        ),
    ]
    return records, other_student, other_group


def test_list_filters_by_student_then_group(session, student, group, sheet):
    records, other_student, other_group = sheet

    assert len(attendance_service.list_attendance(session)) == 2
    assert [r.id for r in attendance_service.list_attendance(session, student_id=student.id)] == [records[0].id]
    assert [r.id for r in attendance_service.list_attendance(session, group_id=other_group.id)] == [records[1].id]
    # student filter wins when both are given
    both = attendance_service.list_attendance(session, student_id=other_student.id, group_id=group.id)
    assert [r.id for r in both] == [records[1].id]


def test_update_changes_status_and_clears_notes(session, sheet):
    records, _, _ = sheet

    updated = attendance_service.update_attendance(
        session,
        records[1].id,
        {"status": AttendanceStatus.LATE, "notes": None},
    )

    assert updated.status == AttendanceStatus.LATE
    assert updated.notes is None


def test_update_missing_record_returns_none(session):
    assert attendance_service.update_attendance(session, "missing", {"status": AttendanceStatus.LATE}) is None


def test_create_requires_existing_student_and_group(session, group):
    with pytest.raises(AttendanceRuleViolation) as excinfo:
        attendance_service.create_attendance(
            session,
            student_id="missing",
            group_id=group.id,
            date=datetime(2024, 9, 2, 9, 0),
            status=AttendanceStatus.PRESENT,
        )

    assert excinfo.value.status_code == 404

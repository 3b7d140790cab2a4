import pytest

from school_crm.models import Medal, MedalType
from school_crm.services import medal_service, student_service
from school_crm.services.medal_service import MedalRuleViolation


def _award(session, student, admin, medal_type=MedalType.GOLD, reason="Top score"):
    return medal_service.award_medal(
        session,
        student_id=student.id,
        medal_type=medal_type,
        reason=reason,
        awarded_by=admin.id,
    )


def test_award_increments_matching_balance_by_one(session, student, admin):
    medal = _award(session, student, admin)

    assert medal.id
    assert medal.student_id == student.id
    assert medal.awarded_by == admin.id
    assert (student.gold_medals, student.silver_medals, student.bronze_medals) == (1, 0, 0)


def test_each_tier_has_its_own_balance(session, student, admin):
    _award(session, student, admin, MedalType.SILVER)
    _award(session, student, admin, MedalType.BRONZE)
    _award(session, student, admin, MedalType.BRONZE)

    assert (student.gold_medals, student.silver_medals, student.bronze_medals) == (0, 1, 2)


@pytest.mark.parametrize("awarded,revoked", [(1, 1), (5, 2), (3, 0)])
def test_balance_tracks_awards_minus_revocations(session, student, admin, awarded, revoked):
    medals = [_award(session, student, admin) for _ in range(awarded)]
    for medal in medals[:revoked]:
        assert medal_service.revoke_medal(session, medal.id) is True

    assert student.gold_medals == awarded - revoked
    assert len(medal_service.list_medals(session, student_id=student.id)) == awarded - revoked


def test_revoke_never_drives_balance_negative(session, student, admin):
    medal = _award(session, student, admin)
    # balance spent elsewhere before the revocation
    student_service.update_student(session, student.id, {"gold_medals": 0})

    assert medal_service.revoke_medal(session, medal.id) is True
    assert student.gold_medals == 0
    assert session.get(Medal, medal.id) is None


def test_revoke_missing_medal_returns_false_and_changes_nothing(session, student, admin):
    _award(session, student, admin)

    assert medal_service.revoke_medal(session, "no-such-medal") is False
    assert student.gold_medals == 1
    assert len(medal_service.list_medals(session)) == 1


def test_award_to_missing_student_is_rejected(session, admin):
    with pytest.raises(MedalRuleViolation) as excinfo:
        medal_service.award_medal(
            session,
            student_id="ghost",
            medal_type=MedalType.GOLD,
            reason="Top score",
            awarded_by=admin.id,
        )

    assert excinfo.value.status_code == 404
    assert medal_service.list_medals(session) == []


def test_award_by_unknown_user_is_rejected(session, student):
    with pytest.raises(MedalRuleViolation) as excinfo:
        medal_service.award_medal(
            session,
            student_id=student.id,
            medal_type=MedalType.SILVER,
            reason="Helpful",
            awarded_by="nobody",
        )

    assert excinfo.value.status_code == 404
    assert student.silver_medals == 0


def test_list_medals_filters_by_student(session, student, admin):
    other = student_service.create_student(session, user_id=student.user_id, student_id="SPR-2024-002")
    _award(session, student, admin)
    _award(session, other, admin, MedalType.BRONZE)

    medals = medal_service.list_medals(session, student_id=other.id)

    assert [m.type for m in medals] == [MedalType.BRONZE]
    assert medals[0].awarder.id == admin.id

import pytest

from learnledger.core.errors import ErrorCode, LedgerError
from learnledger.services import ledger_store


def _register(db, principal, role="student"):
    ledger_store.register_user(db, principal, principal, f"{principal}@example.com", role, 1)
    return principal


def test_enroll_creates_enrollment_and_counts(db, course_id, student):
    assert ledger_store.enroll_in_course(db, student, course_id, 15) is True

    enrollment = ledger_store.get_enrollment_details(db, course_id, student)
    assert enrollment.enrollment_date == 15
    assert enrollment.progress == 0
    assert enrollment.completed is False
    assert ledger_store.get_course_details(db, course_id).current_enrollments == 1


def test_enroll_unknown_course_not_found(db, student):
    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, student, 42, 1)
    assert exc.value.code == ErrorCode.NOT_FOUND


def test_enroll_unknown_course_checked_before_registration(db):
    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, "SP-GHOST", 42, 1)
    assert exc.value.code == ErrorCode.NOT_FOUND


def test_enroll_unregistered_caller_unauthorized(db, course_id):
    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, "SP-GHOST", course_id, 1)
    assert exc.value.code == ErrorCode.UNAUTHORIZED


def test_enroll_twice_already_enrolled(db, course_id, student):
    ledger_store.enroll_in_course(db, student, course_id, 11)

    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, student, course_id, 12)
    assert exc.value.code == ErrorCode.ALREADY_ENROLLED

    assert ledger_store.get_course_details(db, course_id).current_enrollments == 1
    assert ledger_store.get_enrollment_details(db, course_id, student).enrollment_date == 11


def test_capacity_scenario(db):
    a = _register(db, "A", "instructor")
    course_id = ledger_store.create_course(db, a, "Intro", "D", 2, 10, 20)
    assert course_id == 1

    b = _register(db, "B")
    ledger_store.enroll_in_course(db, b, 1, 11)
    assert ledger_store.get_course_details(db, 1).current_enrollments == 1

    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, b, 1, 12)
    assert exc.value.code == ErrorCode.ALREADY_ENROLLED

    c = _register(db, "C")
    ledger_store.enroll_in_course(db, c, 1, 13)
    assert ledger_store.get_course_details(db, 1).current_enrollments == 2

    d = _register(db, "D")
    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, d, 1, 14)
    assert exc.value.code == ErrorCode.COURSE_FULL
    assert ledger_store.get_course_details(db, 1).current_enrollments == 2
    assert ledger_store.get_enrollment_details(db, 1, d) is None


def test_full_course_reported_before_duplicate(db, instructor):
    course_id = ledger_store.create_course(db, instructor, "Tiny", "One seat", 1, 1, 2)
    b = _register(db, "B")
    ledger_store.enroll_in_course(db, b, course_id, 1)

    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, b, course_id, 2)
    assert exc.value.code == ErrorCode.COURSE_FULL


def test_enroll_in_inactive_course(db, course_id, instructor, student):
    ledger_store.deactivate_course(db, instructor, course_id)

    with pytest.raises(LedgerError) as exc:
        ledger_store.enroll_in_course(db, student, course_id, 1)
    assert exc.value.code == ErrorCode.COURSE_NOT_STARTED


def test_get_enrollment_details_unknown_returns_none(db, course_id):
    assert ledger_store.get_enrollment_details(db, course_id, "SP-GHOST") is None

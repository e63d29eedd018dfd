import pytest

from learnledger.core.errors import ErrorCode, LedgerError
from learnledger.models.user import UserRole
from learnledger.services import ledger_store


def test_register_user_stores_record(db):
    assert ledger_store.register_user(db, "SP1", "Alice", "alice@example.com", "student", 42) is True

    user = ledger_store.get_user_info(db, "SP1")
    assert user.name == "Alice"
    assert user.email == "alice@example.com"
    assert user.role == UserRole.student
    assert user.created_at == 42


def test_register_user_twice_fails_already_exists(db):
    ledger_store.register_user(db, "SP1", "Alice", "alice@example.com", "student", 1)

    with pytest.raises(LedgerError) as exc:
        ledger_store.register_user(db, "SP1", "Alice Again", "other@example.com", "admin", 2)
    assert exc.value.code == ErrorCode.ALREADY_EXISTS

    # Original record untouched
    user = ledger_store.get_user_info(db, "SP1")
    assert user.name == "Alice"
    assert user.role == UserRole.student
    assert user.created_at == 1


def test_duplicate_registration_with_bad_input_still_already_exists(db):
    ledger_store.register_user(db, "SP1", "Alice", "alice@example.com", "student", 1)

    with pytest.raises(LedgerError) as exc:
        ledger_store.register_user(db, "SP1", "", "", "wizard", 2)
    assert exc.value.code == ErrorCode.ALREADY_EXISTS


@pytest.mark.parametrize("role", ["student", "instructor", "admin"])
def test_register_user_accepts_every_role(db, role):
    ledger_store.register_user(db, "SP1", "Alice", "alice@example.com", role, 1)
    assert ledger_store.get_user_info(db, "SP1").role == UserRole(role)


@pytest.mark.parametrize("role", ["teacher", "Admin", "", "superadministrator"])
def test_register_user_rejects_unknown_role(db, role):
    with pytest.raises(LedgerError) as exc:
        ledger_store.register_user(db, "SP1", "Alice", "alice@example.com", role, 1)
    assert exc.value.code == ErrorCode.INVALID_INPUT
    assert ledger_store.get_user_info(db, "SP1") is None


@pytest.mark.parametrize(
    "name, email",
    [
        ("", "alice@example.com"),
        ("x" * 51, "alice@example.com"),
        ("Alice", ""),
        ("Alice", "e" * 101),
    ],
)
def test_register_user_rejects_bad_name_or_email(db, name, email):
    with pytest.raises(LedgerError) as exc:
        ledger_store.register_user(db, "SP1", name, email, "student", 1)
    assert exc.value.code == ErrorCode.INVALID_INPUT


def test_register_user_accepts_boundary_lengths(db):
    ledger_store.register_user(db, "SP1", "x" * 50, "e" * 100, "student", 1)
    user = ledger_store.get_user_info(db, "SP1")
    assert len(user.name) == 50
    assert len(user.email) == 100


def test_get_user_info_unknown_returns_none(db):
    assert ledger_store.get_user_info(db, "NOBODY") is None

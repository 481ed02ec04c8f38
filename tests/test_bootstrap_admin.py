import pytest

from mentorhub import models
from mentorhub.models.enums import Role
from mentorhub.scripts.bootstrap_admin import CONFIRM_PHRASE, bootstrap_admin
from mentorhub.utils.security import verify_password


@pytest.fixture
def admin_env(monkeypatch):
    monkeypatch.setenv("ENABLE_ADMIN_BOOTSTRAP", "true")
    monkeypatch.setenv("ADMIN_BOOTSTRAP_CONFIRM", CONFIRM_PHRASE)
    monkeypatch.setenv("ADMIN_EMAIL", "Root@Example.org")
    monkeypatch.setenv("ADMIN_PASSWORD", "long-enough-password")
    monkeypatch.setenv("ADMIN_NAME", "Root Admin")
    return monkeypatch


def test_creates_first_admin(db_session, admin_env):
    assert bootstrap_admin(db_session) == 0

    admin = db_session.query(models.User).one()
    assert admin.email == "root@example.org"
    assert admin.role == Role.ADMIN
    assert admin.name == "Root Admin"
    assert verify_password("long-enough-password", admin.password_hash)


def test_refuses_when_an_admin_exists(db_session, admin_env):
    assert bootstrap_admin(db_session) == 0
    admin_env.setenv("ADMIN_EMAIL", "second@example.org")
    assert bootstrap_admin(db_session) == 1
    assert db_session.query(models.User).count() == 1


@pytest.mark.parametrize(
    "key,value",
    [
        ("ENABLE_ADMIN_BOOTSTRAP", "false"),
        ("ADMIN_BOOTSTRAP_CONFIRM", "yes please"),
        ("ADMIN_EMAIL", "not-an-email"),
        ("ADMIN_PASSWORD", "short"),
    ],
)
def test_guard_rails(db_session, admin_env, key, value):
    admin_env.setenv(key, value)
    assert bootstrap_admin(db_session) == 1
    assert db_session.query(models.User).count() == 0

from typing import Callable, FrozenSet, Iterable, Union

from fastapi import Depends, Request
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.database import get_db
from mentorhub.exceptions import Forbidden, Unauthenticated
from mentorhub.models.enums import ALL_ROLES, Role
from mentorhub.utils.session_store import get_session_user_id


# ==========================
# AUTH CONFIG
# ==========================

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)

RoleSpec = Union[Role, str, Iterable[Union[Role, str]]]


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_truncate(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_truncate(password))


def _truncate(password: str) -> str:
    """Bcrypt only looks at the first 72 bytes; newer releases refuse more."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        password = password_bytes[:72].decode("utf-8", errors="ignore")
    return password


# ==========================
# ROLE CHECKS
# ==========================

def normalize_roles(roles: RoleSpec) -> FrozenSet[Role]:
    """Accept a single role or a collection of roles; reject an empty set."""
    if isinstance(roles, (Role, str)):
        roles = [roles]
    normalized = frozenset(Role(role) for role in roles)
    if not normalized:
        raise ValueError("At least one role is required")
    return normalized


def authorize(user: models.User, roles: RoleSpec) -> models.User:
    """Return ``user`` when their role is in ``roles``, else raise Forbidden."""
    if user.role not in normalize_roles(roles):
        raise Forbidden("Unauthorized")
    return user


# ==========================
# AUTH DEPENDENCIES
# ==========================

def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> models.User:
    user_id = get_session_user_id(request)
    if user_id is None:
        raise Unauthenticated("Login required")

    user = db.query(models.User).filter(
        models.User.id == user_id
    ).first()

    if user is None:
        raise Unauthenticated("Login required")

    return user


def require_roles(*roles: Union[Role, str]) -> Callable[..., models.User]:
    """Build a dependency resolving the current user and checking their role.

    Usage: ``current_user: User = Depends(require_roles(Role.MENTOR))``.
    With no arguments every role is accepted (any authenticated user).
    """
    allowed = normalize_roles(roles or ALL_ROLES)

    def dependency(current_user: models.User = Depends(get_current_user)) -> models.User:
        return authorize(current_user, allowed)

    return dependency

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.crud.base import commit_or_invalid
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.models.enums import Role, TagKind
from mentorhub.utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2


def parse_role(value) -> Optional[Role]:
    """Return the Role for ``value`` or None unless it is exactly one of the three."""
    try:
        return Role(value)
    except ValueError:
        return None


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def register_user(db: Session, email: str, password: str, role) -> models.User:
    """
    Create an account with a bcrypt password hash.

    Raises:
        ValidationError: if email/password are missing, the role is not
            ADMIN, MENTOR or MENTEE, or the email is already registered.
    """
    normalized_email = normalize_email(email)
    parsed_role = parse_role(role)
    if not normalized_email or not password or parsed_role is None:
        raise ValidationError("Invalid input")

    existing = db.query(models.User).filter(models.User.email == normalized_email).first()
    if existing:
        raise ValidationError("Email already registered")

    user = models.User(
        email=normalized_email,
        password_hash=get_password_hash(password),
        role=parsed_role,
    )
    db.add(user)
    commit_or_invalid(db, user, "Email already registered")
    logger.info("Registered user %s with role %s", user.id, parsed_role.value)
    return user


def authenticate_user(db: Session, email: str, password: str) -> models.User:
    user = db.query(models.User).filter(
        models.User.email == normalize_email(email)
    ).first()

    if not user or not password or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %r", normalize_email(email))
        raise ValidationError("Invalid credentials")

    return user


def get_user(db: Session, user_id: int) -> models.User:
    user = db.query(models.User).filter(models.User.id == user_id).first()
    if user is None:
        raise NotFound("User not found")
    return user


def get_user_by_email(db: Session, email: str) -> models.User:
    user = db.query(models.User).filter(models.User.email == normalize_email(email)).first()
    if user is None:
        raise NotFound("User not found")
    return user


def list_users(db: Session) -> List[models.User]:
    return db.query(models.User).order_by(models.User.id.asc()).all()


def _clean_values(values: Optional[Iterable[str]]) -> List[str]:
    cleaned = []
    for raw in values or []:
        value = (raw or "").strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return cleaned


def update_user_profile(
    db: Session,
    user_id: int,
    *,
    name: Optional[str],
    bio: Optional[str] = None,
    skills: Optional[Iterable[str]] = None,
    goals: Optional[Iterable[str]] = None,
) -> models.User:
    """Replace name, bio, skills and goals in one write."""
    name = (name or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError("Name must be at least 2 characters")

    user = get_user(db, user_id)
    user.name = name
    user.bio = (bio or "").strip() or None

    # Surviving rows are reused: the flush inserts before it deletes, so a
    # fresh row for an unchanged value would trip uq_user_tag.
    existing = {(tag.kind, tag.value): tag for tag in user.tags}
    wanted = [(TagKind.SKILL, value) for value in _clean_values(skills)]
    wanted += [(TagKind.GOAL, value) for value in _clean_values(goals)]
    user.tags = [
        existing.get((kind, value)) or models.UserTag(kind=kind, value=value)
        for kind, value in wanted
    ]

    return commit_or_invalid(db, user)


def update_user_role(db: Session, user_id: int, role) -> models.User:
    parsed_role = parse_role(role)
    if parsed_role is None:
        raise ValidationError("Invalid role")

    user = get_user(db, user_id)
    previous = Role(user.role)
    user.role = parsed_role
    commit_or_invalid(db, user)
    logger.info("Role of user %s changed from %s to %s", user.id, previous.value, parsed_role.value)
    return user

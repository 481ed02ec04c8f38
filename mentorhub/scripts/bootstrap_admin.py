"""Create the first ADMIN account.

Registration is admin-only, so a fresh database needs one admin created out
of band. Run with:

    ENABLE_ADMIN_BOOTSTRAP=true \
    ADMIN_BOOTSTRAP_CONFIRM=CREATE-FIRST-ADMIN \
    ADMIN_EMAIL=admin@example.org ADMIN_PASSWORD=... \
    python -m mentorhub.scripts.bootstrap_admin
"""

import logging
import os
import re
import sys
from typing import Optional

from mentorhub import models
from mentorhub.crud import user as user_crud
from mentorhub.database import SessionLocal, get_engine, init_db
from mentorhub.models.enums import Role

logger = logging.getLogger(__name__)

CONFIRM_PHRASE = "CREATE-FIRST-ADMIN"
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _required_env(key: str) -> str:
    value = os.getenv(key, "").strip()
    if not value:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def _validate_password(password: str) -> None:
    if len(password) < 8:
        raise ValueError("ADMIN_PASSWORD must be at least 8 characters.")
    if len(password.encode("utf-8")) > 72:
        raise ValueError("ADMIN_PASSWORD must be <= 72 bytes (bcrypt limit).")


def bootstrap_admin(db=None) -> int:
    own_session = db is None
    try:
        if not _is_truthy(os.getenv("ENABLE_ADMIN_BOOTSTRAP")):
            raise ValueError(
                "Bootstrap disabled. Set ENABLE_ADMIN_BOOTSTRAP=true to run."
            )
        confirm = _required_env("ADMIN_BOOTSTRAP_CONFIRM")
        if confirm != CONFIRM_PHRASE:
            raise ValueError(
                f"Invalid ADMIN_BOOTSTRAP_CONFIRM. Expected exact phrase: {CONFIRM_PHRASE}"
            )

        email = _required_env("ADMIN_EMAIL").lower()
        password = _required_env("ADMIN_PASSWORD")
        name = os.getenv("ADMIN_NAME", "").strip()

        if not EMAIL_RE.match(email):
            raise ValueError("ADMIN_EMAIL is not a valid email format.")
        _validate_password(password)

        if own_session:
            init_db()
            db = SessionLocal(bind=get_engine())
        try:
            existing_admin_count = db.query(models.User).filter(
                models.User.role == Role.ADMIN
            ).count()
            if existing_admin_count > 0:
                raise ValueError(
                    "Admin bootstrap blocked: an admin already exists. "
                    "Further accounts are created from /auth/register."
                )

            user = user_crud.register_user(db, email, password, Role.ADMIN)
            if len(name) >= user_crud.MIN_NAME_LENGTH:
                user_crud.update_user_profile(db, user.id, name=name)

            logger.info("Admin created successfully: %s", email)
            return 0
        finally:
            if own_session:
                db.close()
    except ValueError as exc:
        logger.error("Admin bootstrap failed: %s", exc)
        return 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(levelname)s %(message)s")
    raise SystemExit(bootstrap_admin())

# mentorhub/api/admin.py
"""
Admin panel: user and role management plus read-only oversight of
mentorship matches and booked sessions.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from mentorhub import models, schemas
from mentorhub.api.forms import parse_id
from mentorhub.crud import mentorship as mentorship_crud
from mentorhub.crud import session as session_crud
from mentorhub.crud import user as user_crud
from mentorhub.database import get_db
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.models.enums import Role
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

# ─────────────────────────────────────────
# HELPER: Enforce admin access
# ─────────────────────────────────────────
require_admin = require_roles(Role.ADMIN)


def _users_page(request: Request, admin, users, error=None, status_code=200):
    return render(
        request,
        "admin/users.html",
        {
            "user": admin,
            "users": [schemas.UserDisplay.model_validate(u) for u in users],
            "roles": list(Role),
            "error": error,
        },
        status_code=status_code,
    )


# ─────────────────────────────────────────
# GET /admin/users: List all users
# ─────────────────────────────────────────
@router.get("/users")
def list_users(
    request: Request,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return _users_page(request, admin, user_crud.list_users(db))


# ─────────────────────────────────────────
# POST /admin/users: Change a user's role
# ─────────────────────────────────────────
@router.post("/users")
def update_role(
    request: Request,
    userId: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        user_crud.update_user_role(db, parse_id(userId), role)
    except (ValidationError, NotFound) as exc:
        return _users_page(
            request,
            admin,
            user_crud.list_users(db),
            error=exc.message,
            status_code=exc.status_code,
        )

    logger.info("Admin %s updated role of user %s", admin.id, userId)
    return redirect("/admin/users")


# ─────────────────────────────────────────
# GET /admin/matches: Accepted mentorship requests
# ─────────────────────────────────────────
@router.get("/matches")
def list_matches(
    request: Request,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    matches = mentorship_crud.get_all_mentorship_matches(db)
    return render(
        request,
        "admin/matches.html",
        {
            "user": admin,
            "matches": [schemas.MentorshipRequestDisplay.from_model(m) for m in matches],
        },
    )


# ─────────────────────────────────────────
# GET /admin/sessions: Every booked session
# ─────────────────────────────────────────
@router.get("/sessions")
def list_all_sessions(
    request: Request,
    admin: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    sessions = session_crud.get_all_sessions(db)
    return render(
        request,
        "admin/sessions.html",
        {
            "user": admin,
            "sessions": [schemas.SessionDisplay.from_model(s) for s in sessions],
        },
    )

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.crud import user as user_crud
from mentorhub.database import get_db
from mentorhub.exceptions import ValidationError
from mentorhub.models.enums import Role
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles
from mentorhub.utils.session_store import commit_session, destroy_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

require_admin = require_roles(Role.ADMIN)


# ===== LOGIN =====

@router.get("/login")
def login_page(request: Request):
    return render(request, "auth/login.html")


@router.post("/login")
def login(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    """Verify credentials and start a cookie session."""
    try:
        user = user_crud.authenticate_user(db, email, password)
    except ValidationError as exc:
        return render(
            request,
            "auth/login.html",
            {"error": exc.message, "email": email},
            status_code=exc.status_code,
        )

    logger.info("User %s logged in", user.id)
    return commit_session(redirect("/dashboard"), user.id)


# ===== REGISTER (ADMIN ONLY) =====

@router.get("/register")
def register_page(
    request: Request,
    current_user: models.User = Depends(require_admin),
):
    return render(request, "auth/register.html", {"user": current_user, "roles": list(Role)})


@router.post("/register")
def register(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    current_user: models.User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Create an account, then continue as the new user on the profile form."""
    try:
        new_user = user_crud.register_user(db, email, password, role)
    except ValidationError as exc:
        return render(
            request,
            "auth/register.html",
            {"user": current_user, "error": exc.message, "email": email, "roles": list(Role)},
            status_code=exc.status_code,
        )

    logger.info("Admin %s registered user %s", current_user.id, new_user.id)
    return commit_session(redirect("/profile/edit"), new_user.id)


# ===== LOGOUT =====

@router.post("/logout")
def logout(current_user: models.User = Depends(require_roles())):
    logger.info("User %s logged out", current_user.id)
    return destroy_session(redirect("/auth/login"))

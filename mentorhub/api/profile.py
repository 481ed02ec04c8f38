from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.constants import GOAL_OPTIONS, SKILL_OPTIONS
from mentorhub.crud import user as user_crud
from mentorhub.database import get_db
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles

router = APIRouter(prefix="/profile", tags=["Profile"])


def _form_context(current_user, *, name, bio, skills, goals, error=None):
    return {
        "user": current_user,
        "error": error,
        "form": {"name": name, "bio": bio, "skills": skills, "goals": goals},
        "skill_options": _with_extra(SKILL_OPTIONS, skills),
        "goal_options": _with_extra(GOAL_OPTIONS, goals),
    }


def _with_extra(options, selected):
    """Keep values saved earlier selectable even if no longer offered."""
    return list(options) + [value for value in selected or [] if value not in options]


# ======================
# GET: Edit form
# ======================
@router.get("/edit")
def edit_profile_page(
    request: Request,
    current_user: models.User = Depends(require_roles()),
):
    return render(
        request,
        "profile_edit.html",
        _form_context(
            current_user,
            name=current_user.name or "",
            bio=current_user.bio or "",
            skills=current_user.skills,
            goals=current_user.goals,
        ),
    )


# ======================
# POST: Save profile
# ======================
@router.post("/edit")
def edit_profile(
    request: Request,
    name: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    skills: List[str] = Form([]),
    goals: List[str] = Form([]),
    current_user: models.User = Depends(require_roles()),
    db: Session = Depends(get_db),
):
    try:
        user_crud.update_user_profile(
            db,
            current_user.id,
            name=name,
            bio=bio,
            skills=skills,
            goals=goals,
        )
    except (ValidationError, NotFound) as exc:
        return render(
            request,
            "profile_edit.html",
            _form_context(current_user, name=name, bio=bio, skills=skills, goals=goals, error=exc.message),
            status_code=exc.status_code,
        )

    return redirect("/dashboard")

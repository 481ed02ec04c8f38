import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from sqlalchemy.orm import Session

from mentorhub import models, schemas
from mentorhub.api.forms import parse_id
from mentorhub.constants import SKILL_OPTIONS
from mentorhub.crud import mentorship as mentorship_crud
from mentorhub.database import get_db
from mentorhub.exceptions import ValidationError
from mentorhub.models.enums import Role
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mentors", tags=["Mentors"])

require_mentee = require_roles(Role.MENTEE)


def _page(request: Request, current_user, mentors, selected, error=None, status_code=200):
    return render(
        request,
        "mentors.html",
        {
            "user": current_user,
            "mentors": [schemas.UserDisplay.model_validate(m) for m in mentors],
            "selected_skills": selected,
            "skill_options": SKILL_OPTIONS,
            "error": error,
        },
        status_code=status_code,
    )


# ======================
# SEARCH
# ======================
@router.get("")
def search_mentors(
    request: Request,
    skills: List[str] = Query([]),
    current_user: models.User = Depends(require_mentee),
    db: Session = Depends(get_db),
):
    """Mentors having any of the selected skills."""
    mentors = mentorship_crud.get_mentors_by_skills(db, skills)
    return _page(request, current_user, mentors, skills)


# ======================
# REQUEST MENTORSHIP
# ======================
@router.post("")
def request_mentorship(
    request: Request,
    mentorId: Optional[str] = Form(None),
    current_user: models.User = Depends(require_mentee),
    db: Session = Depends(get_db),
):
    try:
        mentorship_crud.create_mentorship_request(db, current_user.id, parse_id(mentorId))
    except ValidationError as exc:
        return _page(request, current_user, [], [], error=exc.message, status_code=exc.status_code)

    return redirect("/requests")

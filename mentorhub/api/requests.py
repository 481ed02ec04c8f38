from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from mentorhub import models, schemas
from mentorhub.api.forms import parse_id
from mentorhub.crud import mentorship as mentorship_crud
from mentorhub.database import get_db
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.models.enums import Role
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles

router = APIRouter(tags=["Mentorship Requests"])


def _list_for(db: Session, user: models.User):
    if user.role == Role.MENTEE:
        return mentorship_crud.get_mentorship_requests_by_mentee(db, user.id)
    return mentorship_crud.get_mentorship_requests_by_mentor(db, user.id)


def _page(request: Request, current_user, requests, error=None, status_code=200):
    return render(
        request,
        "requests.html",
        {
            "user": current_user,
            "is_mentee": current_user.role == Role.MENTEE,
            "requests": [schemas.MentorshipRequestDisplay.from_model(r) for r in requests],
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/requests")
def list_requests(
    request: Request,
    current_user: models.User = Depends(require_roles(Role.MENTEE, Role.MENTOR)),
    db: Session = Depends(get_db),
):
    """Mentees see what they sent, mentors what they received."""
    return _page(request, current_user, _list_for(db, current_user))


@router.post("/requests")
def decide_request(
    request: Request,
    requestId: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    current_user: models.User = Depends(require_roles(Role.MENTOR)),
    db: Session = Depends(get_db),
):
    try:
        mentorship_crud.update_mentorship_request(
            db,
            parse_id(requestId),
            status,
            mentor_id=current_user.id,
        )
    except (ValidationError, NotFound) as exc:
        return _page(
            request,
            current_user,
            _list_for(db, current_user),
            error=exc.message,
            status_code=exc.status_code,
        )

    return redirect("/requests")


@router.get("/my-requests")
def my_requests():
    return redirect("/requests")

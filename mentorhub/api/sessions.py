# mentorhub/api/sessions.py
"""
Session booking and feedback.

Mentees book sessions with a mentor and rate them afterwards; mentors only
read their sessions. Both actions post to the same path and are told apart
by the hidden ``action`` field of the form.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from mentorhub import models, schemas
from mentorhub.api.forms import parse_id
from mentorhub.crud import session as session_crud
from mentorhub.database import get_db
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.models.enums import Role
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles

router = APIRouter(tags=["sessions"])

CREATE_ACTION = "create"
FEEDBACK_ACTION = "feedback"


def _list_for(db: Session, user: models.User):
    if user.role == Role.MENTEE:
        return session_crud.get_sessions_by_mentee(db, user.id)
    return session_crud.get_sessions_by_mentor(db, user.id)


def _page(request: Request, current_user, sessions, error=None, status_code=200):
    return render(
        request,
        "sessions.html",
        {
            "user": current_user,
            "is_mentee": current_user.role == Role.MENTEE,
            "sessions": [schemas.SessionDisplay.from_model(s) for s in sessions],
            "error": error,
        },
        status_code=status_code,
    )


# ======================
# SESSION LISTING
# ======================
@router.get("/sessions")
def list_sessions(
    request: Request,
    current_user: models.User = Depends(require_roles(Role.MENTEE, Role.MENTOR)),
    db: Session = Depends(get_db),
):
    return _page(request, current_user, _list_for(db, current_user))


@router.get("/my-sessions")
def my_sessions():
    return redirect("/sessions")


# ======================
# BOOK / GIVE FEEDBACK
# ======================
@router.post("/sessions")
def session_action(
    request: Request,
    action: Optional[str] = Form(None),
    mentorId: Optional[str] = Form(None),
    startTime: Optional[str] = Form(None),
    endTime: Optional[str] = Form(None),
    sessionId: Optional[str] = Form(None),
    rating: Optional[str] = Form(None),
    comment: Optional[str] = Form(None),
    current_user: models.User = Depends(require_roles(Role.MENTEE)),
    db: Session = Depends(get_db),
):
    try:
        if action == CREATE_ACTION:
            session_crud.create_session(
                db,
                parse_id(mentorId),
                current_user.id,
                startTime,
                endTime,
            )
        elif action == FEEDBACK_ACTION:
            session_crud.submit_session_feedback(
                db,
                parse_id(sessionId),
                rating,
                comment,
                mentee_id=current_user.id,
            )
        else:
            raise ValidationError("Unknown action")
    except (ValidationError, NotFound) as exc:
        return _page(
            request,
            current_user,
            _list_for(db, current_user),
            error=exc.message,
            status_code=exc.status_code,
        )

    return redirect("/sessions")

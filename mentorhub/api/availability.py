from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.crud import availability as availability_crud
from mentorhub.database import get_db
from mentorhub.exceptions import ValidationError
from mentorhub.models.enums import Role
from mentorhub.utils.rendering import redirect, render
from mentorhub.utils.security import require_roles

router = APIRouter(prefix="/availability", tags=["Availability"])

require_mentor = require_roles(Role.MENTOR)


def _page(request: Request, current_user, availabilities, error=None, status_code=200):
    return render(
        request,
        "availability.html",
        {
            "user": current_user,
            "availabilities": availabilities,
            "days": availability_crud.DAYS_OF_WEEK,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("")
def list_availability(
    request: Request,
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db),
):
    availabilities = availability_crud.get_availability_by_mentor(db, current_user.id)
    return _page(request, current_user, availabilities)


@router.post("")
def add_availability(
    request: Request,
    dayOfWeek: Optional[str] = Form(None),
    startTime: Optional[str] = Form(None),
    endTime: Optional[str] = Form(None),
    current_user: models.User = Depends(require_mentor),
    db: Session = Depends(get_db),
):
    """Add a weekly slot. Overlapping slots are accepted as-is."""
    try:
        availability_crud.create_availability(db, current_user.id, dayOfWeek, startTime, endTime)
    except ValidationError as exc:
        return _page(
            request,
            current_user,
            availability_crud.get_availability_by_mentor(db, current_user.id),
            error=exc.message,
            status_code=exc.status_code,
        )

    return redirect("/availability")

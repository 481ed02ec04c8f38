from fastapi import APIRouter, Depends, Request

from mentorhub import models, schemas
from mentorhub.utils.rendering import render
from mentorhub.utils.security import require_roles

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard")
def dashboard(
    request: Request,
    current_user: models.User = Depends(require_roles()),
):
    return render(
        request,
        "dashboard.html",
        {"user": current_user, "profile": schemas.UserDisplay.model_validate(current_user)},
    )

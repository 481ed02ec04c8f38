from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from mentorhub.models.enums import RequestStatus
from mentorhub.schemas.user import display_name


class MentorshipRequestDisplay(BaseModel):
    id: int
    mentee_id: int
    mentor_id: int
    status: RequestStatus
    created_at: Optional[datetime] = None
    mentee_name: Optional[str] = None
    mentor_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    @classmethod
    def from_model(cls, request) -> "MentorshipRequestDisplay":
        return cls(
            id=request.id,
            mentee_id=request.mentee_id,
            mentor_id=request.mentor_id,
            status=request.status,
            created_at=request.created_at,
            mentee_name=display_name(request.mentee),
            mentor_name=display_name(request.mentor),
        )

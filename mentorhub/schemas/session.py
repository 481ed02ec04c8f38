from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mentorhub.schemas.user import display_name


# ======================
# FEEDBACK
# ======================

class Feedback(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


# ======================
# SESSION DISPLAY
# ======================

class SessionDisplay(BaseModel):
    id: int
    mentor_id: int
    mentee_id: int
    start_time: datetime
    end_time: datetime
    feedback: Optional[Feedback] = None
    mentor_name: Optional[str] = None
    mentee_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_model(cls, session) -> "SessionDisplay":
        feedback = None
        if session.feedback_rating is not None:
            feedback = Feedback(rating=session.feedback_rating, comment=session.feedback_comment)
        return cls(
            id=session.id,
            mentor_id=session.mentor_id,
            mentee_id=session.mentee_id,
            start_time=session.start_time,
            end_time=session.end_time,
            feedback=feedback,
            mentor_name=display_name(session.mentor),
            mentee_name=display_name(session.mentee),
        )

# mentorhub/models/mentorship.py
from sqlalchemy import Column, Enum, ForeignKey, Integer, TIMESTAMP, func
from sqlalchemy.orm import relationship

from mentorhub.database import Base
from mentorhub.models.enums import RequestStatus


class MentorshipRequest(Base):
    __tablename__ = "mentorship_requests"

    id = Column(Integer, primary_key=True, index=True)
    mentee_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    mentor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    status = Column(
        Enum(RequestStatus, native_enum=False, length=10, validate_strings=True),
        default=RequestStatus.PENDING,
        nullable=False,
        index=True,
    )
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    mentee = relationship("User", foreign_keys=[mentee_id])
    mentor = relationship("User", foreign_keys=[mentor_id])

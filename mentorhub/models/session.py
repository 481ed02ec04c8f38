# mentorhub/models/session.py
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship

from mentorhub.database import Base


class Session(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    mentee_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    feedback_rating = Column(Integer)
    feedback_comment = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "feedback_rating IS NULL OR (feedback_rating >= 1 AND feedback_rating <= 5)",
            name="check_feedback_rating_range",
        ),
    )

    # Relationships
    mentor = relationship("User", foreign_keys=[mentor_id])
    mentee = relationship("User", foreign_keys=[mentee_id])

    @property
    def has_feedback(self) -> bool:
        return self.feedback_rating is not None

# mentorhub/models/availability.py
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mentorhub.database import Base


class Availability(Base):
    __tablename__ = "availabilities"

    id = Column(Integer, primary_key=True, index=True)
    mentor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    day_of_week = Column(String(10), nullable=False)
    # "HH:MM" wall-clock strings as submitted by the form
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)

    mentor = relationship("User", back_populates="availabilities")

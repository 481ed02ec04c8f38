# mentorhub/crud/availability.py
from typing import List, Optional

from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.crud.base import commit_or_invalid
from mentorhub.exceptions import ValidationError

DAYS_OF_WEEK = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def create_availability(
    db: Session,
    mentor_id: int,
    day_of_week: Optional[str],
    start_time: Optional[str],
    end_time: Optional[str],
) -> models.Availability:
    day_of_week = (day_of_week or "").strip()
    start_time = (start_time or "").strip()
    end_time = (end_time or "").strip()
    if not day_of_week or not start_time or not end_time:
        raise ValidationError("All fields are required")

    availability = models.Availability(
        mentor_id=mentor_id,
        day_of_week=day_of_week,
        start_time=start_time,
        end_time=end_time,
    )
    db.add(availability)
    return commit_or_invalid(db, availability)


def get_availability_by_mentor(db: Session, mentor_id: int) -> List[models.Availability]:
    return (
        db.query(models.Availability)
        .filter(models.Availability.mentor_id == mentor_id)
        .order_by(models.Availability.id.asc())
        .all()
    )

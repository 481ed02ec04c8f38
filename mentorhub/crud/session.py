# mentorhub/crud/session.py
import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.crud.base import commit_or_invalid
from mentorhub.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def parse_datetime(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Parse an ISO 8601 / datetime-local value; None when unparseable.

    Values carrying an offset are converted to naive UTC, the form the
    ``DateTime`` columns store.
    """
    if isinstance(value, datetime):
        parsed = value
    elif not value:
        return None
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_rating(value) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def create_session(
    db: Session,
    mentor_id: Optional[int],
    mentee_id: Optional[int],
    start_time,
    end_time,
) -> models.Session:
    start_dt = parse_datetime(start_time)
    end_dt = parse_datetime(end_time)
    if not mentor_id or not mentee_id or start_dt is None or end_dt is None:
        raise ValidationError("Invalid input")

    # Only checks that the mentor has declared some availability, not that
    # the booked window falls inside one of the declared slots.
    availability = db.query(models.Availability.id).filter(
        models.Availability.mentor_id == mentor_id
    ).first()
    if not availability:
        raise ValidationError("Mentor has no availability set")

    session = models.Session(
        mentor_id=mentor_id,
        mentee_id=mentee_id,
        start_time=start_dt,
        end_time=end_dt,
    )
    db.add(session)
    commit_or_invalid(db, session)
    logger.info("Session %s booked: mentee %s with mentor %s", session.id, mentee_id, mentor_id)
    return session


def get_session(db: Session, session_id: int) -> models.Session:
    session = db.query(models.Session).filter(models.Session.id == session_id).first()
    if session is None:
        raise NotFound("Session not found")
    return session


def get_sessions_by_mentor(db: Session, mentor_id: int) -> List[models.Session]:
    return (
        db.query(models.Session)
        .filter(models.Session.mentor_id == mentor_id)
        .order_by(models.Session.start_time.desc())
        .all()
    )


def get_sessions_by_mentee(db: Session, mentee_id: int) -> List[models.Session]:
    return (
        db.query(models.Session)
        .filter(models.Session.mentee_id == mentee_id)
        .order_by(models.Session.start_time.desc())
        .all()
    )


def get_all_sessions(db: Session) -> List[models.Session]:
    return db.query(models.Session).order_by(models.Session.start_time.desc()).all()


def submit_session_feedback(
    db: Session,
    session_id: Optional[int],
    rating,
    comment: Optional[str] = None,
    *,
    mentee_id: Optional[int] = None,
) -> models.Session:
    """
    Record the mentee's rating and comment for a session.

    The rating is checked before anything is read, so an out-of-range value
    never touches the stored session. Feedback can only be set once.
    """
    parsed_rating = parse_rating(rating)
    if parsed_rating is None or not (MIN_RATING <= parsed_rating <= MAX_RATING):
        raise ValidationError("Invalid rating")

    query = db.query(models.Session).filter(models.Session.id == session_id)
    if mentee_id is not None:
        query = query.filter(models.Session.mentee_id == mentee_id)
    session = query.first()
    if session is None:
        raise NotFound("Session not found")

    if session.has_feedback:
        raise ValidationError("Feedback already submitted")

    session.feedback_rating = parsed_rating
    session.feedback_comment = (comment or "").strip() or None
    commit_or_invalid(db, session)
    logger.info("Feedback %s/5 recorded for session %s", parsed_rating, session.id)
    return session

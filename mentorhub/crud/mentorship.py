# mentorhub/crud/mentorship.py
"""
Mentorship CRUD Operations
Mentor search, mentorship requests and the ACCEPTED "matches" view.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from mentorhub import models
from mentorhub.crud.base import commit_or_invalid
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.models.enums import RequestStatus, Role, TagKind

logger = logging.getLogger(__name__)

DECISION_STATUSES = (RequestStatus.ACCEPTED, RequestStatus.REJECTED)


# ======================
# MENTOR SEARCH
# ======================

def get_mentors_by_skills(db: Session, skills: Iterable[str]) -> List[models.User]:
    """
    Mentors holding at least one of ``skills``.

    An empty selection matches nobody, the same as an empty ``IN ()``.
    """
    wanted = [s.strip() for s in skills or [] if s and s.strip()]
    if not wanted:
        return []

    return (
        db.query(models.User)
        .join(models.UserTag, models.UserTag.user_id == models.User.id)
        .filter(
            models.User.role == Role.MENTOR,
            models.UserTag.kind == TagKind.SKILL,
            models.UserTag.value.in_(wanted),
        )
        .distinct()
        .order_by(models.User.id.asc())
        .all()
    )


# ======================
# REQUESTS
# ======================

def create_mentorship_request(
    db: Session,
    mentee_id: Optional[int],
    mentor_id: Optional[int],
) -> models.MentorshipRequest:
    """
    Create a request from a mentee to a mentor.

    New requests always start PENDING; only a mentor decision moves them on.

    Raises:
        ValidationError: if either id is missing or does not reference a user
    """
    if not mentee_id or not mentor_id:
        raise ValidationError("Mentee and mentor IDs are required")

    request = models.MentorshipRequest(
        mentee_id=mentee_id,
        mentor_id=mentor_id,
        status=RequestStatus.PENDING,
    )
    db.add(request)
    commit_or_invalid(db, request, "Mentee and mentor IDs are required")
    logger.info("Mentee %s requested mentor %s (request %s)", mentee_id, mentor_id, request.id)
    return request


def get_mentorship_requests_by_mentee(db: Session, mentee_id: int) -> List[models.MentorshipRequest]:
    return (
        db.query(models.MentorshipRequest)
        .filter(models.MentorshipRequest.mentee_id == mentee_id)
        .order_by(models.MentorshipRequest.created_at.desc(), models.MentorshipRequest.id.desc())
        .all()
    )


def get_mentorship_requests_by_mentor(db: Session, mentor_id: int) -> List[models.MentorshipRequest]:
    return (
        db.query(models.MentorshipRequest)
        .filter(models.MentorshipRequest.mentor_id == mentor_id)
        .order_by(models.MentorshipRequest.created_at.desc(), models.MentorshipRequest.id.desc())
        .all()
    )


def parse_decision(status) -> Optional[RequestStatus]:
    try:
        parsed = RequestStatus(status)
    except ValueError:
        return None
    return parsed if parsed in DECISION_STATUSES else None


def update_mentorship_request(
    db: Session,
    request_id: Optional[int],
    status,
    *,
    mentor_id: Optional[int] = None,
) -> models.MentorshipRequest:
    """
    Accept or reject a request.

    Args:
        db: Database session
        request_id: Request identifier
        status: "ACCEPTED" or "REJECTED"
        mentor_id: when given, the request must be addressed to this mentor

    Returns:
        The updated request. Repeating the decision already recorded is a
        no-op, so the call is idempotent.

    Raises:
        ValidationError: bad status, or the request was already decided the
            other way
        NotFound: no such request (for this mentor)
    """
    decision = parse_decision(status)
    if decision is None:
        raise ValidationError("Invalid status")

    query = db.query(models.MentorshipRequest).filter(models.MentorshipRequest.id == request_id)
    if mentor_id is not None:
        query = query.filter(models.MentorshipRequest.mentor_id == mentor_id)
    request = query.first()
    if request is None:
        raise NotFound("Mentorship request not found")

    if request.status == decision:
        return request
    if request.status != RequestStatus.PENDING:
        raise ValidationError("Request has already been decided")

    request.status = decision
    commit_or_invalid(db, request)
    logger.info("Mentorship request %s marked %s", request.id, decision.value)
    return request


def get_all_mentorship_matches(db: Session) -> List[models.MentorshipRequest]:
    return (
        db.query(models.MentorshipRequest)
        .filter(models.MentorshipRequest.status == RequestStatus.ACCEPTED)
        .order_by(models.MentorshipRequest.created_at.desc(), models.MentorshipRequest.id.desc())
        .all()
    )

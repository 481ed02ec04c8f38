from __future__ import annotations

import pytest

from mentorhub.crud import mentorship as mentorship_crud
from mentorhub.crud import user as user_crud
from mentorhub.exceptions import NotFound, ValidationError
from mentorhub.models.enums import RequestStatus, Role


def _create_user(db, email, role, *, name=None, skills=()):
    user = user_crud.register_user(db, email, "pw", role)
    if name:
        user_crud.update_user_profile(db, user.id, name=name, skills=skills)
    return user


@pytest.fixture
def pair(db_session):
    mentee = _create_user(db_session, "mentee@x.com", Role.MENTEE, name="Mia")
    mentor = _create_user(db_session, "mentor@x.com", Role.MENTOR, name="Max", skills=["Finance"])
    return mentee, mentor


# ======================
# SEARCH
# ======================

def test_mentor_search_matches_any_selected_skill(db_session):
    finance = _create_user(db_session, "f@x.com", Role.MENTOR, name="Fay", skills=["Finance"])
    design = _create_user(db_session, "d@x.com", Role.MENTOR, name="Dan", skills=["UI/UX", "Marketing"])
    _create_user(db_session, "dev@x.com", Role.MENTOR, name="Dev", skills=["Development"])
    # Mentees with the skill never show up.
    _create_user(db_session, "learner@x.com", Role.MENTEE, name="Lee", skills=["Finance"])

    found = mentorship_crud.get_mentors_by_skills(db_session, ["Finance", "Marketing"])
    assert [m.id for m in found] == [finance.id, design.id]


def test_mentor_with_several_matching_skills_is_listed_once(db_session):
    mentor = _create_user(db_session, "multi@x.com", Role.MENTOR, name="Mo", skills=["UI/UX", "Marketing"])
    found = mentorship_crud.get_mentors_by_skills(db_session, ["UI/UX", "Marketing"])
    assert [m.id for m in found] == [mentor.id]


@pytest.mark.parametrize("skills", [[], None, ["", "  "]])
def test_empty_skill_selection_matches_nobody(db_session, skills):
    _create_user(db_session, "f@x.com", Role.MENTOR, name="Fay", skills=["Finance"])
    assert mentorship_crud.get_mentors_by_skills(db_session, skills) == []


# ======================
# REQUESTS
# ======================

def test_new_request_is_always_pending(db_session, pair):
    mentee, mentor = pair
    request = mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)

    assert request.status == RequestStatus.PENDING
    assert request.created_at is not None
    assert mentorship_crud.get_all_mentorship_matches(db_session) == []


def test_duplicate_requests_are_allowed(db_session, pair):
    mentee, mentor = pair
    mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)
    mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)
    assert len(mentorship_crud.get_mentorship_requests_by_mentee(db_session, mentee.id)) == 2


@pytest.mark.parametrize("mentee_id,mentor_id", [(None, 1), (1, None), (0, 0)])
def test_request_requires_both_ids(db_session, mentee_id, mentor_id):
    with pytest.raises(ValidationError, match="Mentee and mentor IDs are required"):
        mentorship_crud.create_mentorship_request(db_session, mentee_id, mentor_id)


def test_requests_listed_per_side(db_session, pair):
    mentee, mentor = pair
    other_mentor = _create_user(db_session, "other@x.com", Role.MENTOR)
    first = mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)
    second = mentorship_crud.create_mentorship_request(db_session, mentee.id, other_mentor.id)

    assert {r.id for r in mentorship_crud.get_mentorship_requests_by_mentee(db_session, mentee.id)} == {
        first.id,
        second.id,
    }
    assert [r.id for r in mentorship_crud.get_mentorship_requests_by_mentor(db_session, mentor.id)] == [first.id]


def test_accepting_twice_is_idempotent(db_session, pair):
    mentee, mentor = pair
    request = mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)

    once = mentorship_crud.update_mentorship_request(db_session, request.id, "ACCEPTED")
    twice = mentorship_crud.update_mentorship_request(db_session, request.id, "ACCEPTED")

    assert once.status == twice.status == RequestStatus.ACCEPTED
    assert [m.id for m in mentorship_crud.get_all_mentorship_matches(db_session)] == [request.id]


def test_decided_request_cannot_flip(db_session, pair):
    mentee, mentor = pair
    request = mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)
    mentorship_crud.update_mentorship_request(db_session, request.id, RequestStatus.REJECTED)

    with pytest.raises(ValidationError, match="already been decided"):
        mentorship_crud.update_mentorship_request(db_session, request.id, RequestStatus.ACCEPTED)
    db_session.refresh(request)
    assert request.status == RequestStatus.REJECTED


@pytest.mark.parametrize(
    "status",
    ["PENDING", "", None, "MAYBE", "accepted", "Rejected", " ACCEPTED", "REJECTED "],
)
def test_update_rejects_non_decision_status(db_session, pair, status):
    mentee, mentor = pair
    request = mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)
    with pytest.raises(ValidationError, match="Invalid status"):
        mentorship_crud.update_mentorship_request(db_session, request.id, status)
    db_session.refresh(request)
    assert request.status == RequestStatus.PENDING


def test_update_is_scoped_to_addressed_mentor(db_session, pair):
    mentee, mentor = pair
    intruder = _create_user(db_session, "intruder@x.com", Role.MENTOR)
    request = mentorship_crud.create_mentorship_request(db_session, mentee.id, mentor.id)

    with pytest.raises(NotFound):
        mentorship_crud.update_mentorship_request(
            db_session, request.id, "ACCEPTED", mentor_id=intruder.id
        )
    updated = mentorship_crud.update_mentorship_request(
        db_session, request.id, "ACCEPTED", mentor_id=mentor.id
    )
    assert updated.status == RequestStatus.ACCEPTED


def test_update_unknown_request(db_session):
    with pytest.raises(NotFound, match="Mentorship request not found"):
        mentorship_crud.update_mentorship_request(db_session, 12345, "REJECTED")

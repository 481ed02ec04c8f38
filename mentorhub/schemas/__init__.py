# mentorhub/schemas/__init__.py

# User schemas
from .user import UserDisplay

# Mentorship schemas
from .mentorship import MentorshipRequestDisplay

# Session schemas
from .session import Feedback, SessionDisplay

__all__ = [
    "UserDisplay",
    "MentorshipRequestDisplay",
    "Feedback",
    "SessionDisplay",
]

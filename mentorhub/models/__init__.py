# mentorhub/models/__init__.py
# Import models in dependency order
from .enums import Role, RequestStatus, TagKind
from .user import User, UserTag
from .availability import Availability
from .mentorship import MentorshipRequest
from .session import Session  # Import Session LAST

__all__ = [
    "Role",
    "RequestStatus",
    "TagKind",
    "User",
    "UserTag",
    "Availability",
    "MentorshipRequest",
    "Session",
]

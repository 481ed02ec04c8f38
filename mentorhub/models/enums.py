import enum


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    MENTOR = "MENTOR"
    MENTEE = "MENTEE"


class RequestStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class TagKind(str, enum.Enum):
    SKILL = "skill"
    GOAL = "goal"


ALL_ROLES = frozenset(Role)

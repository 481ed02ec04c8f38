from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from mentorhub.models.enums import Role


# ======================
# USER DISPLAY
# ======================

class UserDisplay(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    role: Role
    bio: Optional[str] = None
    skills: List[str] = []
    goals: List[str] = []
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def display_name(self) -> str:
        return self.name or self.email


def display_name(user) -> Optional[str]:
    if user is None:
        return None
    return user.name or user.email

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text, TIMESTAMP, UniqueConstraint, func
from sqlalchemy.orm import relationship

from mentorhub.database import Base
from mentorhub.models.enums import Role, TagKind


# ---------------- USER (AUTH + PROFILE TABLE) ----------------
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(Role, native_enum=False, length=20, validate_strings=True), nullable=False)
    name = Column(String(100))
    bio = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    tags = relationship(
        "UserTag",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="UserTag.value",
    )
    availabilities = relationship("Availability", back_populates="mentor", cascade="all, delete-orphan")

    def _tag_values(self, kind: TagKind):
        return sorted(tag.value for tag in self.tags if tag.kind == kind)

    @property
    def skills(self):
        return self._tag_values(TagKind.SKILL)

    @property
    def goals(self):
        return self._tag_values(TagKind.GOAL)

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r} role={self.role}>"


# ---------------- SKILLS / GOALS ----------------
class UserTag(Base):
    __tablename__ = "user_tags"
    __table_args__ = (
        UniqueConstraint("user_id", "kind", "value", name="uq_user_tag"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    kind = Column(Enum(TagKind, native_enum=False, length=10), nullable=False)
    value = Column(String(100), nullable=False, index=True)

    user = relationship("User", back_populates="tags")

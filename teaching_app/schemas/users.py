# teaching_app/schemas/users.py
"""User and role schemas"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Mapping, Optional
from enum import Enum

class Role(str, Enum):
    """Roles a user can be granted. A user without a role is a student."""
    ADMIN = "admin"
    INSTRUCTOR = "instructor"

    @classmethod
    def of(cls, user: Optional[Mapping[str, Any]]) -> Optional["Role"]:
        """Return the stored role of a user document, None when absent or unknown"""
        if not user:
            return None
        try:
            return cls(user.get("role"))
        except ValueError:
            return None

class UserCreate(BaseModel):
    """First sign-in payload; any profile fields besides email are stored as sent"""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., description="User email")
    name: Optional[str] = Field(None, description="Display name")
    photo: Optional[str] = Field(None, description="Profile photo URL")

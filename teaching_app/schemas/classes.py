# teaching_app/schemas/classes.py
"""Class offering schemas"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional
from enum import Enum

class ClassStatus(str, Enum):
    """Review state of a class offering"""
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"

class ClassCreate(BaseModel):
    """New class submitted by an instructor

    Status is always reset to pending on insert; extra fields are kept.
    """
    model_config = ConfigDict(extra="allow")

    className: Optional[str] = None
    classImage: Optional[str] = None
    instructorName: Optional[str] = None
    instructorEmail: Optional[str] = None
    price: Optional[Any] = None
    availableSeats: Optional[Any] = None
    enrolled: Optional[Any] = None

class FeedbackRequest(BaseModel):
    """Admin feedback for a class"""
    feedback: Optional[str] = Field(None, description="Feedback text shown to the instructor")

class CapacityUpdate(BaseModel):
    """Seat counters after an enrollment"""
    availableSeats: Optional[Any] = Field(None, description="Seats still open")
    enrolled: Optional[Any] = Field(None, description="Students enrolled")

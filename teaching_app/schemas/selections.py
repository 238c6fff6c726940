# teaching_app/schemas/selections.py
"""Selected class (cart) schemas"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class SelectionCreate(BaseModel):
    """A student's provisional choice of a class"""
    model_config = ConfigDict(extra="allow")

    email: Optional[Any] = Field(None, description="Student email")
    classRef: Optional[Any] = Field(None, description="Id of the selected class")

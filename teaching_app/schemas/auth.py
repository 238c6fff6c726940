# teaching_app/schemas/auth.py

"""Authentication-related schemas"""

from pydantic import BaseModel, Field

class TokenResponse(BaseModel):
    """Signed bearer token"""
    token: str = Field(..., description="JWT access token, valid for one hour")

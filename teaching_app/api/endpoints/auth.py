"""Token endpoint"""

from fastapi import APIRouter, Body, Depends
from typing import Any, Dict
import logging

from teaching_app.core import security
from teaching_app.core.config import Settings
from teaching_app.core.dependencies import get_settings
from teaching_app.schemas.auth import TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/jwt", response_model=TokenResponse)
async def issue_token(
    payload: Dict[str, Any] = Body(...),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Sign the posted claims (usually ``{"email": ...}``) into a one hour token"""
    token = security.create_access_token(payload, settings=settings)
    logger.info(f"Issued token for {payload.get('email')}")
    return TokenResponse(token=token)

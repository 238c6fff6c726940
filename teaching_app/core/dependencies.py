# ============================================================================
# FILE: teaching_app/core/dependencies.py
# ============================================================================
"""Dependency injection for FastAPI routes"""

from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import logging

from teaching_app.core import security
from teaching_app.core.config import Settings, settings as default_settings
from teaching_app.core.payment_gateway import PaymentGateway
from teaching_app.core.store import Store
from teaching_app.schemas.users import Role

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "unauthorized access"
FORBIDDEN_MESSAGE = "forbidden access"

bearer_scheme = HTTPBearer(auto_error=False)

def get_settings(request: Request) -> Settings:
    """Settings the application was created with"""
    return getattr(request.app.state, "settings", None) or default_settings

def get_store(request: Request) -> Store:
    """Store created in the application lifespan"""
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("Database client is not available")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database client unavailable"
        )
    return store

def get_gateway(request: Request) -> PaymentGateway:
    """Payment gateway created in the application lifespan"""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        logger.error("Payment gateway is not available")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Payment gateway unavailable"
        )
    return gateway

def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Verify the bearer token and return its decoded claims"""
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE)
    try:
        return security.decode_access_token(credentials.credentials, settings=settings)
    except jwt.PyJWTError as exc:
        logger.debug(f"Rejected token: {exc}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE) from exc

def require_role(role: Role):
    """Factory for a guard that only lets users holding ``role`` through

    Usage in routes:
        claims: dict = Depends(require_role(Role.ADMIN))
    """
    async def _guard(
        claims: Dict[str, Any] = Depends(get_token_claims),
        store: Store = Depends(get_store),
    ) -> Dict[str, Any]:
        email = claims.get("email")
        # a missing email would match user documents without one
        user = await store.users.find_one({"email": email}) if email else None
        if Role.of(user) is not role:
            logger.warning(f"Denied {role.value} access to {claims.get('email')}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)
        return claims
    return _guard

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from teaching_app.core.config import Settings, settings as default_settings

# Payloads are signed verbatim, so only the signature and our own exp are checked
DECODE_OPTIONS = {
    "require": ["exp"],
    "verify_aud": False,
    "verify_iss": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_sub": False,
    "verify_jti": False,
}


def create_access_token(
    payload: Dict[str, Any],
    expires_hours: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or default_settings
    expire_hours = expires_hours or settings.ACCESS_TOKEN_EXPIRE_HOURS
    claims = dict(payload)
    claims["exp"] = datetime.now(timezone.utc) + timedelta(hours=expire_hours)
    return jwt.encode(claims, settings.ACCESS_TOKEN, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or default_settings
    return jwt.decode(
        token,
        settings.ACCESS_TOKEN,
        algorithms=[settings.ALGORITHM],
        options=DECODE_OPTIONS,
    )

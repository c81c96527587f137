"""
Token Helpers
=============

JWT encode/decode untuk role gate. User management ada di luar service ini;
token cukup membawa 'sub' dan 'roles' (atau 'role').
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional
import jwt

from .config import settings
from .services.exceptions import AuthenticationError, AuthorizationError


def create_access_token(subject: str, roles: Iterable[str],
                        expires_minutes: Optional[int] = None) -> str:
    """Create a signed access token for subject with the given roles"""
    expires_minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    payload = {
        'sub': subject,
        'roles': list(roles),
        'exp': datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid authentication credentials")


def token_roles(payload: Dict[str, Any]) -> List[str]:
    roles = payload.get('roles')
    if isinstance(roles, str):
        return [roles]
    if roles:
        return list(roles)
    role = payload.get('role')
    return [role] if role else []


def ensure_role(payload: Dict[str, Any], required_role: str) -> None:
    """Raise AuthorizationError kalau token tidak membawa required_role"""
    if required_role not in token_roles(payload):
        raise AuthorizationError(
            f"Role '{required_role}' is required", required_role=required_role
        )

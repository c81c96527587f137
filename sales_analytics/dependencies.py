"""
API Dependencies
================

FastAPI dependencies untuk sales analytics application.
"""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Any, Dict, Optional

from .services import ServiceRegistry, create_service_registry
from .database import get_db_session
from .config import settings
from .security import decode_access_token, ensure_role
from .services.exceptions import AuthenticationError

# auto_error=False: token yang hilang dilaporkan lewat AuthenticationError (401)
security = HTTPBearer(auto_error=False)

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Decode bearer token menjadi payload user"""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return decode_access_token(credentials.credentials)

async def require_admin(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    """Gate untuk endpoint yang hanya boleh dibuka oleh ADMIN_ROLE"""
    ensure_role(current_user, settings.ADMIN_ROLE)
    return current_user

async def get_admin_service_registry(
    current_user: Dict[str, Any] = Depends(require_admin),
    db_session = Depends(get_db_session)
) -> ServiceRegistry:
    """Service registry untuk endpoint yang memerlukan role admin"""
    return create_service_registry(
        db_session=db_session,
        config=settings.model_dump(),
        current_user=current_user.get('sub')
    )

async def get_service_registry_optional(
    db_session = Depends(get_db_session),
) -> ServiceRegistry:
    """Service registry tanpa authentication requirement"""
    return create_service_registry(
        db_session=db_session,
        config=settings.model_dump(),
    )

from collections.abc import Callable

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.config import Settings, get_settings
from app.core.security import decode_access_token
from app.core.exceptions import ForbiddenException, UnauthorizedException
from app.models.principal import Principal
from app.models.role import UserRole

# Missing header is reported by get_current_principal as a 401
security = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """
    FastAPI dependency to validate the access token and build the principal.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT signature and expiration using SECRET_KEY
    3. Return Principal(user_id, tenant_id, role) exactly as encoded

    The user store is not queried: a deleted user or changed role is only
    noticed once the token expires.

    Raises:
        UnauthorizedException: If header missing, token invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Not authenticated")

    return decode_access_token(credentials.credentials, settings)


def authorize(principal: Principal, required_role: UserRole) -> None:
    """
    Require an exact role match.

    Raises:
        ForbiddenException: If principal.role differs from required_role
    """
    if not principal.has_role(required_role):
        raise ForbiddenException(f"Requires {required_role.value} role")


def require_role(required_role: UserRole) -> Callable[..., Principal]:
    """
    Build a dependency that authenticates and then authorizes the caller.

    Usage:
        @router.post("/{slug}/upgrade")
        def upgrade(principal: Principal = Depends(require_role(UserRole.ADMIN))):
            ...
    """

    async def _require_role(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        authorize(principal, required_role)
        return principal

    return _require_role

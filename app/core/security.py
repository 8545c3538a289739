import logging
from datetime import datetime, timedelta, UTC

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import Settings
from app.core.exceptions import InvalidTokenException
from app.models.principal import Principal
from app.models.role import UserRole
from app.models.user import User

logger = logging.getLogger(__name__)

# Password hashing (Argon2)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(
    user: User, settings: Settings, issued_at: datetime | None = None
) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user: Authenticated user; its id, tenant and role are embedded
        settings: Application settings (signing key, algorithm, lifetime)
        issued_at: Issuance time, defaults to now

    Returns:
        Encoded JWT with 'sub', 'tid', 'role', 'iat' and 'exp' claims.
        'exp' is an absolute ACCESS_TOKEN_EXPIRE_DAYS after issuance.
    """
    iat = issued_at or datetime.now(UTC)
    payload = {
        "sub": str(user.id),
        "tid": user.tenant_id,
        "role": user.role.value,
        "iat": iat,
        "exp": iat + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Principal:
    """
    Decode and validate an access token.

    Tokens cannot be revoked; a token stays valid until 'exp' even if the
    user or tenant changed after issuance.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Principal with user_id, tenant_id and role from the token

    Raises:
        InvalidTokenException: If token invalid, expired, or malformed
    """
    try:
        # jose checks signature and expiration
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info("Rejected access token: %s", e)
        raise InvalidTokenException(f"Invalid token: {str(e)}")

    if payload.get("exp") is None:
        raise InvalidTokenException("Token missing expiration")

    try:
        return Principal(
            user_id=int(payload["sub"]),
            tenant_id=int(payload["tid"]),
            role=UserRole(payload["role"]),
        )
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenException("Malformed token payload")

import logging

from sqlalchemy.orm import Session

from app.config import Settings
from app.core.exceptions import NotFoundException, UnauthorizedException
from app.core.security import create_access_token, verify_password
from app.models.principal import Principal
from app.models.tenant import Tenant
from app.models.user import User
from app.repositories.tenant_repository import TenantRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Service for login and identity lookups"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.user_repo = UserRepository(db)
        self.tenant_repo = TenantRepository(db)

    def login(self, email: str, password: str) -> tuple[str, User, Tenant]:
        """
        Verify credentials and issue an access token.

        Unknown email and wrong password fail identically.

        Returns:
            Tuple of (token, user, tenant)

        Raises:
            UnauthorizedException: If credentials are invalid
        """
        user = self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise UnauthorizedException("Invalid email or password")

        token = create_access_token(user, self.settings)
        logger.info("User %s logged in to tenant %s", user.id, user.tenant_id)
        return token, user, user.tenant

    def get_identity(self, principal: Principal) -> tuple[User, Tenant]:
        """
        Load the user and tenant a principal refers to.

        Raises:
            NotFoundException: If either was deleted after the token was issued
        """
        user = self.user_repo.get_by_id(principal.user_id)
        if not user:
            raise NotFoundException("User not found")

        tenant = self.tenant_repo.get_by_id(principal.tenant_id)
        if not tenant:
            raise NotFoundException("Tenant not found")
        return user, tenant

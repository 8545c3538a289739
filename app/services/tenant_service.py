import logging

from sqlalchemy.orm import Session

from app.models.principal import Principal
from app.models.tenant import Tenant, TenantPlan
from app.repositories.tenant_repository import TenantRepository
from app.core.exceptions import (
    ForbiddenException,
    NotFoundException,
    TenantMismatchException,
)

logger = logging.getLogger(__name__)


class TenantService:
    """Service layer for tenant plan management"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)

    def upgrade_tenant(self, slug: str, principal: Principal) -> Tenant:
        """
        Upgrade a tenant to the PRO plan (ADMIN only, own tenant only).

        Upgrading a tenant that is already PRO succeeds without changes.

        Args:
            slug: Slug of the tenant to upgrade
            principal: Authenticated caller

        Returns:
            Upgraded tenant

        Raises:
            ForbiddenException: If caller is not ADMIN
            NotFoundException: If no tenant has this slug
            TenantMismatchException: If the tenant is not the caller's own
        """
        if not principal.is_admin():
            raise ForbiddenException("Only admins can upgrade the plan")

        tenant = self.tenant_repo.get_by_slug(slug)
        if not tenant:
            raise NotFoundException(f"Tenant '{slug}' not found")

        if tenant.id != principal.tenant_id:
            raise TenantMismatchException("Admins can only upgrade their own tenant")

        if tenant.plan == TenantPlan.PRO:
            return tenant

        tenant.plan = TenantPlan.PRO
        tenant = self.tenant_repo.update(tenant)
        logger.info("Tenant %s upgraded to %s by user %s", slug, tenant.plan.value, principal.user_id)
        return tenant

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_role
from app.models.principal import Principal
from app.models.role import UserRole
from app.services.tenant_service import TenantService
from app.schemas.tenant_schemas import TenantResponse

router = APIRouter()


@router.post("/{slug}/upgrade", response_model=TenantResponse)
def upgrade_tenant(
    slug: str,
    principal: Principal = Depends(require_role(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    """
    Upgrade tenant to the PRO plan.

    - **Requires ADMIN role**
    - Admins can only upgrade their own tenant (403 otherwise)
    - Already-PRO tenants are returned unchanged
    """
    service = TenantService(db)
    return service.upgrade_tenant(slug, principal)

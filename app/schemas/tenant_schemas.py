from pydantic import BaseModel
from datetime import datetime
from app.models.tenant import TenantPlan


class TenantResponse(BaseModel):
    """Tenant details response"""

    id: int
    slug: str
    name: str
    plan: TenantPlan
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

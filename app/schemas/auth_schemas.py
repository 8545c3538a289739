from pydantic import BaseModel, Field
from app.models.role import UserRole
from app.schemas.tenant_schemas import TenantResponse


class LoginRequest(BaseModel):
    """Schema for email + password login"""

    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Schema for user response (never includes the password hash)"""

    id: int
    email: str
    role: UserRole
    tenant_id: int

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Schema for a successful login"""

    token: str
    token_type: str = "bearer"
    user: UserResponse
    tenant: TenantResponse


class MeResponse(BaseModel):
    """Schema for the current user and their tenant"""

    user: UserResponse
    tenant: TenantResponse

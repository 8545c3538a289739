from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import get_db
from app.dependencies import get_current_principal
from app.models.principal import Principal
from app.services.auth_service import AuthService
from app.schemas.auth_schemas import LoginRequest, LoginResponse, MeResponse, UserResponse
from app.schemas.tenant_schemas import TenantResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate with email + password and receive an access token valid for 7 days"""
    service = AuthService(db, settings)
    token, user, tenant = service.login(credentials.email, credentials.password)
    return LoginResponse(
        token=token,
        user=UserResponse.model_validate(user),
        tenant=TenantResponse.model_validate(tenant),
    )


@router.get("/me", response_model=MeResponse)
def get_me(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Return the current authenticated user and their tenant"""
    service = AuthService(db, settings)
    user, tenant = service.get_identity(principal)
    return MeResponse(
        user=UserResponse.model_validate(user),
        tenant=TenantResponse.model_validate(tenant),
    )

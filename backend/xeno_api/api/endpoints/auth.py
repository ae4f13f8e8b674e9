"""
Authentication endpoints: register, login and the current profile
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from xeno_api.api.deps import TenantContext, get_auth_service, get_db, get_tenant_context
from xeno_api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserProfile
from xeno_api.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    """
    Create a tenant with its first admin user and sign them in
    """
    token, user = auth.register(db, payload)
    return {"token": token, "user": user}


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    token, user = auth.login(db, payload.email, payload.password)
    return {"token": token, "user": user}


@router.get("/me", response_model=UserProfile)
async def me(
    ctx: TenantContext = Depends(get_tenant_context),
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    return auth.get_profile(db, ctx)

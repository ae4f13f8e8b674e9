"""
Pydantic schemas for registration, login and the user profile
"""

from pydantic import EmailStr, Field, field_validator
from typing import Optional
from uuid import UUID

from xeno_api.models.tenant import normalize_shop_domain
from xeno_api.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """Schema for registering a new tenant and its first user"""

    email: EmailStr = Field(..., description="Login email, unique across all tenants")
    name: str = Field(..., min_length=1, max_length=255, description="User display name")
    password: str = Field(..., min_length=6, max_length=128, description="Plaintext password")
    company_name: str = Field("My Company", min_length=1, max_length=255, description="Tenant company name")
    shop_domain: Optional[str] = Field(None, max_length=255, description="Shopify domain (defaults from company name)")

    @field_validator('name', 'company_name')
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Value cannot be blank")
        return v

    @field_validator('shop_domain')
    @classmethod
    def validate_shop_domain(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return normalize_shop_domain(v)


class LoginRequest(CamelModel):
    """
    Schema for login. Email is a plain string so a malformed address
    fails the same way as an unknown one.
    """

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserProfile(CamelModel):
    """User summary returned by auth endpoints"""

    id: UUID
    email: str
    name: str
    role: str
    tenant_id: UUID
    company: str


class AuthResponse(CamelModel):
    token: str
    user: UserProfile

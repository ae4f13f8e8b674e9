"""
Tenant and user models: the credential store
"""

from sqlalchemy import Column, String, Boolean, DateTime, Text, Uuid, ForeignKey
from sqlalchemy.orm import relationship, validates
import re

from xeno_api.models.base import BaseModel

SHOP_DOMAIN_SUFFIX = ".myshopify.com"
_SHOP_DOMAIN_PATTERN = re.compile(r'^[a-z0-9][a-z0-9\-]*[a-z0-9]\.myshopify\.com$')
_EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
_MAX_SHOP_SLUG = 60


def normalize_shop_domain(domain: str) -> str:
    """
    Normalize a storefront domain to <shop>.myshopify.com form
    """
    if not domain:
        raise ValueError("Shop domain cannot be empty")

    domain = domain.strip().lower().replace('https://', '').replace('http://', '').rstrip('/')

    if not domain.endswith(SHOP_DOMAIN_SUFFIX):
        if '.' not in domain:
            # Assume it's just the shop name
            domain = f"{domain}{SHOP_DOMAIN_SUFFIX}"
        else:
            raise ValueError("Domain must be a valid Shopify domain (*.myshopify.com)")

    if not _SHOP_DOMAIN_PATTERN.match(domain):
        raise ValueError("Invalid Shopify domain format")

    return domain


def default_shop_domain(company_name: str) -> str:
    """
    Derive a storefront domain from a company name. The slug is capped at
    the Shopify store name limit and padded when shorter than two characters.
    """
    slug = re.sub(r'[^a-z0-9]+', '-', company_name.lower()).strip('-')
    slug = slug[:_MAX_SHOP_SLUG].rstrip('-') or "my-company"
    if len(slug) < 2:
        slug = f"{slug}-shop"
    return f"{slug}{SHOP_DOMAIN_SUFFIX}"


class Tenant(BaseModel):
    """
    A storefront account. Owns users and all marketing data.
    """
    __tablename__ = "tenants"

    shop_domain = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Shopify store domain (e.g., example.myshopify.com)"
    )

    company_name = Column(String(255), nullable=False)

    email = Column(String(255), nullable=False, comment="Contact email")

    is_active = Column(Boolean, default=True, nullable=False, index=True)

    access_token = Column(
        Text,
        nullable=True,
        comment="Encrypted Shopify access token"
    )

    users = relationship("User", back_populates="tenant", cascade="all, delete-orphan")

    @validates('shop_domain')
    def validate_shop_domain(self, key: str, domain: str) -> str:
        return normalize_shop_domain(domain)

    @validates('email')
    def validate_email(self, key: str, email: str) -> str:
        if not email or not _EMAIL_PATTERN.match(email):
            raise ValueError("Invalid email format")
        return email.lower()

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, shop_domain={self.shop_domain})>"


class User(BaseModel):
    """
    A login belonging to exactly one tenant. Email is unique system-wide.
    """
    __tablename__ = "users"

    tenant_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    email = Column(String(255), unique=True, nullable=False, index=True)

    name = Column(String(255), nullable=False)

    password_hash = Column(String(255), nullable=False)

    role = Column(String(50), nullable=False, default="admin")

    last_login_at = Column(DateTime(timezone=True), nullable=True)

    tenant = relationship("Tenant", back_populates="users")

    @validates('email')
    def validate_email(self, key: str, email: str) -> str:
        if not email or not _EMAIL_PATTERN.match(email):
            raise ValueError("Invalid email format")
        return email.lower()

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

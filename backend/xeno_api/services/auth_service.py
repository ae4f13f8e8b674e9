"""
Registration, login and profile lookup
"""

import logging
from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from xeno_api.core.errors import Conflict, NotFound, Unauthorized
from xeno_api.core.security import PasswordHasher, SessionClaims, TokenIssuer
from xeno_api.models.base import utcnow
from xeno_api.models.tenant import Tenant, User, default_shop_domain
from xeno_api.schemas.auth import RegisterRequest
from xeno_api.tenancy import TenantContext

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def user_profile(user: User, tenant: Tenant) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "tenant_id": user.tenant_id,
        "company": tenant.company_name,
    }


class AuthService:
    """
    Credential checks and session issuance. Built once per app with the
    hasher and token issuer it should use.
    """

    def __init__(self, hasher: PasswordHasher, issuer: TokenIssuer):
        self.hasher = hasher
        self.issuer = issuer

    def _issue_for(self, user: User) -> str:
        return self.issuer.issue(SessionClaims(
            user_id=user.id,
            tenant_id=user.tenant_id,
            email=user.email,
            role=user.role,
        ))

    @staticmethod
    def _find_user_by_email(db: Session, email: str) -> User:
        return (
            db.query(User)
            .options(joinedload(User.tenant))
            .filter(User.email == email.strip().lower())
            .one_or_none()
        )

    def register(self, db: Session, payload: RegisterRequest) -> Tuple[str, dict]:
        """
        Create a tenant and its first admin user in one transaction.

        Raises:
            Conflict: the email is already registered, or the shop domain is taken
        """
        email = payload.email.strip().lower()
        if self._find_user_by_email(db, email):
            raise Conflict("Email already registered")

        try:
            tenant = Tenant(
                shop_domain=payload.shop_domain or default_shop_domain(payload.company_name),
                company_name=payload.company_name,
                email=email,
                is_active=True,
            )
            db.add(tenant)
            db.flush()

            user = User(
                tenant_id=tenant.id,
                email=email,
                name=payload.name,
                password_hash=self.hasher.hash(payload.password),
                role="admin",
            )
            db.add(user)
            db.flush()
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Registration conflict for {email}: {e.orig}")
            if self._find_user_by_email(db, email):
                raise Conflict("Email already registered")
            raise Conflict("Shop domain already registered")
        except Exception:
            db.rollback()
            raise

        logger.info(f"Registered tenant={tenant.id} user={user.id} email={email}")
        return self._issue_for(user), user_profile(user, tenant)

    def login(self, db: Session, email: str, password: str) -> Tuple[str, dict]:
        """
        Verify credentials and issue a fresh session token.

        Unknown email, wrong password and inactive tenant all raise the same
        Unauthorized error.
        """
        user = self._find_user_by_email(db, email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning(f"LOGIN FAILED | email={email}")
            raise Unauthorized(INVALID_CREDENTIALS)
        if not user.tenant.is_active:
            logger.warning(f"LOGIN FAILED | inactive tenant={user.tenant_id} email={email}")
            raise Unauthorized(INVALID_CREDENTIALS)

        user.last_login_at = utcnow()
        if self.hasher.needs_update(user.password_hash):
            user.password_hash = self.hasher.hash(password)
        db.commit()

        logger.info(f"LOGIN SUCCESS | user_id={user.id} tenant_id={user.tenant_id}")
        return self._issue_for(user), user_profile(user, user.tenant)

    @staticmethod
    def get_profile(db: Session, ctx: TenantContext) -> dict:
        user = (
            db.query(User)
            .options(joinedload(User.tenant))
            .filter(User.id == ctx.user_id, User.tenant_id == ctx.tenant_id)
            .one_or_none()
        )
        if user is None:
            raise NotFound("User not found")
        return user_profile(user, user.tenant)

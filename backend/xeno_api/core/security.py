"""
Password hashing and session token handling
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# bcrypt max 72 byte input
_BCRYPT_MAX_BYTES = 72


def _normalize_password(password: str) -> str:
    """UTF-8 safe truncate to the bcrypt input limit"""
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")


class PasswordHasher:
    """
    Salted one-way password hashing.

    Hashes are in modular crypt format ($2b$<cost>$...) so the algorithm and
    work factor travel with the hash and the policy can change over time.
    """

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__default_rounds=rounds,
            bcrypt__min_rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(_normalize_password(password))

    def verify(self, password: str, hashed: Optional[str]) -> bool:
        if not password or not hashed:
            return False
        try:
            return self._context.verify(_normalize_password(password), hashed)
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be identified")
            return False

    def needs_update(self, hashed: str) -> bool:
        """True when the hash was produced under an older policy"""
        return self._context.needs_update(hashed)


@dataclass(frozen=True)
class SessionClaims:
    """Identity carried by a session token"""

    user_id: uuid.UUID
    tenant_id: uuid.UUID
    email: str
    role: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "userId": str(self.user_id),
            "tenantId": str(self.tenant_id),
            "email": self.email,
            "role": self.role,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SessionClaims":
        return cls(
            user_id=uuid.UUID(str(payload["userId"])),
            tenant_id=uuid.UUID(str(payload["tenantId"])),
            email=str(payload["email"]),
            role=str(payload["role"]),
        )


class TokenRejected(Exception):
    """Raised when a session token fails verification"""

    MALFORMED = "malformed"
    SIGNATURE = "signature"
    EXPIRED = "expired"

    def __init__(self, reason: str):
        super().__init__(f"token rejected: {reason}")
        self.reason = reason


class TokenIssuer:
    """
    Mints and verifies signed, time-limited bearer tokens.

    The secret is handed in at construction; rotating it invalidates every
    outstanding token.
    """

    def __init__(self, secret: str, ttl: timedelta, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, claims: SessionClaims, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = claims.to_payload()
        payload.update({
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        })
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenRejected(TokenRejected.EXPIRED)
        except jwt.InvalidSignatureError:
            raise TokenRejected(TokenRejected.SIGNATURE)
        except jwt.InvalidTokenError:
            raise TokenRejected(TokenRejected.MALFORMED)

        try:
            return SessionClaims.from_payload(payload)
        except (KeyError, ValueError, TypeError):
            raise TokenRejected(TokenRejected.MALFORMED)

"""Authentication backend for JWT and password handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- JWT token creation and verification
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from chronos.config import settings
from chronos.core.auth.schemas import Role, TokenData


# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt with a per-call random salt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


# ============================================================
# JWT Token Utilities
# ============================================================


def create_access_token(
    user_id: str,
    tenant_id: str,
    role: Role | str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT access token.

    Args:
        user_id: The user's id
        tenant_id: The tenant's id
        role: The user's role
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode: dict[str, Any] = {
        "userId": str(user_id),
        "tenantId": str(tenant_id),
        "role": str(role),
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenData | None:
    """Decode and validate a JWT token.

    Signature, expiry and claim shape are all checked; nothing from an
    unverified token is ever returned.

    Args:
        token: The JWT token to decode

    Returns:
        TokenData if valid, None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )

        user_id = payload.get("userId")
        tenant_id = payload.get("tenantId")
        role = payload.get("role")
        exp = payload.get("exp")

        if not user_id or not tenant_id or not role or exp is None:
            return None

        return TokenData(
            user_id=user_id,
            tenant_id=tenant_id,
            role=role,
            exp=datetime.fromtimestamp(exp, tz=UTC),
        )

    except (JWTError, ValueError, TypeError):
        return None

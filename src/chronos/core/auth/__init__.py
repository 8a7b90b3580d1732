"""Authentication module for JWT, password handling and tenant membership."""

from chronos.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from chronos.core.auth.dependencies import CurrentIdentity, get_identity
from chronos.core.auth.schemas import TokenData


__all__ = [
    # Dependencies
    "CurrentIdentity",
    # Schemas
    "TokenData",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_identity",
    # Password utilities
    "hash_password",
    "verify_password",
]

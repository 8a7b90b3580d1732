"""Database layer - session management, base models, mixins and scoping."""

from chronos.core.database.base import (
    Base,
    CreatedAtMixin,
    IdMixin,
    OwnerMixin,
    TenantMixin,
    TimestampMixin,
    generate_id,
    utcnow,
)
from chronos.core.database.scoped import Scope, ScopedRepository
from chronos.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
    transaction,
)


__all__ = [
    "Base",
    "CreatedAtMixin",
    "IdMixin",
    "OwnerMixin",
    "Scope",
    "ScopedRepository",
    "TenantMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "generate_id",
    "get_db",
    "transaction",
    "utcnow",
]

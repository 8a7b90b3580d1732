"""Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database. HTTP tests run the real
application with the database dependency pointed at that database.
"""

import os


# Configure settings before anything imports chronos
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-for-the-chronos-test-suite"
os.environ["BCRYPT_ROUNDS"] = "4"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from dataclasses import dataclass  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from chronos.core.auth.backend import (  # noqa: E402
    create_access_token,
    decode_token,
    hash_password,
)
from chronos.core.auth.schemas import TokenData  # noqa: E402
from chronos.core.constants import DEFAULT_INVITE_KEYS  # noqa: E402
from chronos.core.database import Base, generate_id, get_db, utcnow  # noqa: E402
from chronos.core.permissions import Role  # noqa: E402
from chronos.main import create_app  # noqa: E402

# Import all models to ensure they're registered with Base.metadata
from chronos.modules.categories.models import Category  # noqa: E402
from chronos.modules.tenants.models import InviteKey, Tenant  # noqa: E402
from chronos.modules.todos.models import Todo  # noqa: E402, F401
from chronos.modules.users.models import User  # noqa: E402
from tests.factories import TEST_PASSWORD  # noqa: E402


SessionFactory = async_sessionmaker[AsyncSession]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> SessionFactory:
    """Session factory bound to the test database."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_factory: SessionFactory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for repository and service tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory: SessionFactory) -> FastAPI:
    """Create test application instance."""
    application = create_app()

    # Same lifecycle as get_db, against the test database
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


# ============================================================
# Tenant and User Fixtures
# ============================================================


@dataclass
class Workspace:
    """A provisioned tenant with one admin and one member."""

    tenant: Tenant
    admin: User
    member: User

    @property
    def admin_token(self) -> str:
        return create_access_token(self.admin.id, self.tenant.id, Role.ADMIN)

    @property
    def member_token(self) -> str:
        return create_access_token(self.member.id, self.tenant.id, Role.MEMBER)

    @property
    def admin_identity(self) -> TokenData:
        return decode_token(self.admin_token)

    @property
    def member_identity(self) -> TokenData:
        return decode_token(self.member_token)

    @property
    def admin_headers(self) -> dict[str, str]:
        return bearer(self.admin_token)

    @property
    def member_headers(self) -> dict[str, str]:
        return bearer(self.member_token)


@pytest.fixture
async def invite_keys(session_factory: SessionFactory) -> tuple[str, ...]:
    """Seed the default invite keys, all unused."""
    async with session_factory() as session:
        session.add_all(InviteKey(key=key, is_used=False) for key in DEFAULT_INVITE_KEYS)
        await session.commit()
    return DEFAULT_INVITE_KEYS


@pytest.fixture
def make_workspace(
    session_factory: SessionFactory,
) -> Callable[[str], Awaitable[Workspace]]:
    """Factory inserting a tenant with an admin and a member directly."""

    async def _make(slug: str) -> Workspace:
        now = utcnow()
        tenant = Tenant(
            id=generate_id(),
            name=slug.replace("-", " ").title(),
            slug=slug,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        admin = User(
            id=generate_id(),
            tenant_id=tenant.id,
            username=f"admin-{slug}",
            email=f"admin@{slug}.example.com",
            full_name=f"{slug} Admin",
            password_hash=hash_password(TEST_PASSWORD),
            role=Role.ADMIN.value,
            created_at=now,
        )
        member = User(
            id=generate_id(),
            tenant_id=tenant.id,
            username=f"member-{slug}",
            email=f"member@{slug}.example.com",
            full_name=f"{slug} Member",
            password_hash=hash_password(TEST_PASSWORD),
            role=Role.MEMBER.value,
            created_at=now,
        )
        async with session_factory() as session:
            session.add(tenant)
            await session.flush()
            session.add_all([admin, member])
            await session.commit()
        return Workspace(tenant=tenant, admin=admin, member=member)

    return _make


@pytest.fixture
async def workspace(make_workspace: Callable[[str], Awaitable[Workspace]]) -> Workspace:
    """Primary tenant for tests."""
    return await make_workspace("acme")


@pytest.fixture
async def other_workspace(
    make_workspace: Callable[[str], Awaitable[Workspace]],
) -> Workspace:
    """A second, unrelated tenant."""
    return await make_workspace("globex")


@pytest.fixture
def make_category(
    session_factory: SessionFactory,
) -> Callable[..., Awaitable[Category]]:
    """Factory inserting a category owned by a user."""

    async def _make(owner: User, name: str = "Work", color: str = "#1A2B3C") -> Category:
        category = Category(
            id=generate_id(),
            user_id=owner.id,
            tenant_id=owner.tenant_id,
            name=name,
            color=color,
            created_at=utcnow(),
        )
        async with session_factory() as session:
            session.add(category)
            await session.commit()
        return category

    return _make


@pytest.fixture
def make_todo(
    session_factory: SessionFactory,
) -> Callable[..., Awaitable[Todo]]:
    """Factory inserting a todo owned by a user."""

    async def _make(
        owner: User,
        title: str = "Write report",
        category_id: str | None = None,
        **fields,
    ) -> Todo:
        now = utcnow()
        values = {
            "is_completed": False,
            "priority": "medium",
            "created_at": now,
            "updated_at": now,
        }
        values.update(fields)
        todo = Todo(
            id=generate_id(),
            user_id=owner.id,
            tenant_id=owner.tenant_id,
            category_id=category_id,
            title=title,
            **values,
        )
        async with session_factory() as session:
            session.add(todo)
            await session.commit()
        return todo

    return _make

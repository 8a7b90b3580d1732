#!/usr/bin/env python
"""
Seed invite keys and demo data for development.
"""

import argparse
import asyncio
import sys

from sqlalchemy import select

from chronos.core.constants import DEFAULT_INVITE_KEYS
from chronos.core.database import Base, async_engine, async_session_factory
from chronos.core.utils.text import generate_slug
from chronos.modules.categories.models import Category  # noqa: F401
from chronos.modules.tenants.models import InviteKey, Tenant  # noqa: F401
from chronos.modules.tenants.repos import InviteKeyRepository
from chronos.modules.tenants.schemas import TenantCreateRequest
from chronos.modules.tenants.services import TenantService
from chronos.modules.todos.models import Todo  # noqa: F401
from chronos.modules.users.models import User  # noqa: F401


DEMO_INVITE_KEY = "chronos-demo"
DEMO_TENANT_NAME = "Demo Workspace"
DEMO_SLUG = generate_slug(DEMO_TENANT_NAME)


async def create_tables() -> None:
    """Create all tables that do not exist yet."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created")


async def seed_invite_keys() -> None:
    """Create the default invite keys, resetting any used ones."""
    async with async_session_factory() as session:
        repo = InviteKeyRepository(session)
        for key in DEFAULT_INVITE_KEYS:
            await repo.upsert_unused(key)
            print(f"Invite key ready: {key}")
        await session.commit()


async def seed_demo() -> None:
    """Provision a demo tenant with an admin user."""
    async with async_session_factory() as session:
        result = await session.execute(select(Tenant).where(Tenant.slug == DEMO_SLUG))
        existing = result.scalar_one_or_none()
        if existing:
            print(f"Demo tenant already exists: {existing.name} ({existing.id})")
            return

        await InviteKeyRepository(session).upsert_unused(DEMO_INVITE_KEY)
        await session.commit()

        tenant, admin = await TenantService(session).create_tenant(
            TenantCreateRequest(
                name=DEMO_TENANT_NAME,
                slug=DEMO_SLUG,
                email="demo-admin@example.com",
                full_name="Demo Admin",
                password="demo-password",
                invite_key=DEMO_INVITE_KEY,
            )
        )
        print(f"Created demo tenant: {tenant.name} ({tenant.id})")
        print(f"Admin login: {admin.email} / demo-password")


async def main(scenario: str, create: bool) -> None:
    """Run the seeding based on scenario."""
    if create:
        await create_tables()

    if scenario == "default":
        await seed_invite_keys()
    elif scenario == "demo":
        await seed_invite_keys()
        await seed_demo()
    else:
        print(f"Unknown scenario: {scenario}")
        print("Available scenarios: default, demo")
        sys.exit(1)

    await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed database with invite keys")
    parser.add_argument(
        "--scenario",
        "-s",
        default="default",
        help="Seed scenario to run (default, demo)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args()

    asyncio.run(main(args.scenario, args.create_tables))

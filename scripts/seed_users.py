#!/usr/bin/env python3
"""Create or update the configured users with hashed PINs.

Users come from AUTH__SEED_USERS, a JSON object of name to PIN:

    AUTH__SEED_USERS='{"Taylor": "1234", "Scarlett": "5678"}' python scripts/seed_users.py
"""

import asyncio
import sys

import logfire

from trip.config import Settings
from trip.domain.service import AuthService
from trip.util.di.container import create_container
from trip.util.observability import configure_logfire


async def seed(settings: Settings) -> int:
    """Upsert every seed user. Returns the number of users written."""
    container = create_container()
    try:
        # One request scope, so all users commit in one transaction
        async with container() as request_container:
            auth_service = await request_container.get(AuthService)
            for name, pin in settings.auth.seed_users.items():
                await auth_service.seed_user(name, pin)
    finally:
        await container.close()

    return len(settings.auth.seed_users)


def main() -> int:
    """Seed users and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    if not settings.auth.seed_users:
        logfire.warn("No seed users configured, set AUTH__SEED_USERS")
        return 1

    try:
        count = asyncio.run(seed(settings))
        logfire.info("Users seeded", count=count)
        return 0
    except Exception as e:
        logfire.error(
            "Seeding users failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

"""Create the initial administrator account if it does not exist yet.

Run with:  python -m leavedesk.seed
Password comes from ADMIN_PASSWORD (default "password").
"""

from __future__ import annotations

import asyncio
import logging
import os

from leavedesk.config import get_settings
from leavedesk.db import Database
from leavedesk.models.account import Account
from leavedesk.models.enums import Gender, Role
from leavedesk.security import hash_password
from leavedesk.services.account import get_account_by_email

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@leavedesk.local"


async def seed_admin(db: Database, password: str) -> Account:
    """Insert the admin account if missing. Existing accounts are left untouched."""
    async with db.session() as session:
        existing = await get_account_by_email(session, ADMIN_EMAIL)
        if existing is not None:
            logger.info("Admin account already present: %s", existing.id)
            return existing

        admin = Account(
            email=ADMIN_EMAIL,
            name="Admin User",
            hashed_password=hash_password(password),
            role=Role.ADMIN.value,
            gender=Gender.OTHER.value,
            is_active=True,
        )
        session.add(admin)
        await session.commit()
        logger.info("Created admin account %s", admin.id)
        return admin


async def main() -> None:
    db = Database(get_settings().database_url)
    try:
        await seed_admin(db, os.environ.get("ADMIN_PASSWORD", "password"))
    finally:
        await db.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    asyncio.run(main())

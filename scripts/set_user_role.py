#!/usr/bin/env python3
"""
Assign or clear a user's role out-of-band.

Usage:
    python scripts/set_user_role.py alice@example.com admin
    python scripts/set_user_role.py alice@example.com --clear
"""

import asyncio
import sys

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient

load_dotenv()

from catalog.core.config import config  # noqa: E402
from catalog.db.mongodb import USERS_COLLECTION  # noqa: E402


class UserRoleManager:
    def __init__(self):
        self.client = None
        self.users = None

    async def connect(self):
        """Establish MongoDB connection"""
        print(f"Connecting to MongoDB database '{config.mongodb_database}'...")
        self.client = AsyncIOMotorClient(config.mongodb_url)
        self.users = self.client[config.mongodb_database][USERS_COLLECTION]
        await self.client.admin.command("ping")

    async def set_role(self, email: str, role: str) -> bool:
        result = await self.users.update_one({"email": email}, {"$set": {"role": role}})
        return result.matched_count > 0

    async def clear_role(self, email: str) -> bool:
        result = await self.users.update_one({"email": email}, {"$unset": {"role": ""}})
        return result.matched_count > 0

    async def close(self):
        """Close MongoDB connection"""
        if self.client:
            self.client.close()


async def main():
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)

    email, role = sys.argv[1], sys.argv[2]
    manager = UserRoleManager()

    try:
        await manager.connect()

        if role == "--clear":
            found = await manager.clear_role(email)
            action = "cleared role of"
        else:
            found = await manager.set_role(email, role)
            action = f"set role '{role}' for"

        if not found:
            print(f"No user with email {email}")
            sys.exit(1)

        print(f"Successfully {action} {email}")
    finally:
        await manager.close()


if __name__ == "__main__":
    asyncio.run(main())

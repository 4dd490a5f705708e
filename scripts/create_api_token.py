"""Mint a bearer token for an existing user (development only).

Usage:
    python -m scripts.create_api_token <user_id> [minutes]
"""

import asyncio
import sys
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import UserRepository
from app.infrastructure.security.jwt import create_access_token


async def main() -> None:
    if len(sys.argv) < 2 or not sys.argv[1].isdigit():
        print("Usage: python -m scripts.create_api_token <user_id> [minutes]", file=sys.stderr)
        sys.exit(1)
    load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)
    user_id = int(sys.argv[1])
    minutes = int(sys.argv[2]) if len(sys.argv) > 2 else None

    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not configured", file=sys.stderr)
        sys.exit(1)
    async with database.AsyncSessionLocal() as session:
        user = await UserRepository(session).get_result_by_id(user_id)
    await database.dispose_engine()
    if user is None:
        print(f"User not found: {user_id}", file=sys.stderr)
        sys.exit(1)

    expires = timedelta(minutes=minutes) if minutes else None
    print(create_access_token({"sub": str(user.id)}, expires_delta=expires))


if __name__ == "__main__":
    asyncio.run(main())

"""Seed a development database with a building, users, tasks and comments.

Creates every table from the ORM metadata when missing, then inserts a small
data set spread over October/November so the created_from / created_to /
timezone filters have something to bite on. Prints a bearer token for the
building owner.

Usage:
    python -m scripts.seed_dev_data

Requires: DATABASE_URL and SECRET_KEY (environment or .env).
"""

from __future__ import annotations

import asyncio
import sys
from datetime import UTC, datetime
from pathlib import Path

from dotenv import load_dotenv

from app.domain.enums import TaskStatus
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import Building, Task, TaskComment, User
from app.infrastructure.security.jwt import create_access_token

_TASKS = [
    # title, status, created_at (UTC), assignee index
    ("Replace lobby light bulbs", TaskStatus.OPEN, datetime(2025, 9, 25, 8, 30, tzinfo=UTC), 1),
    ("Inspect fire extinguishers", TaskStatus.COMPLETED, datetime(2025, 10, 10, 9, 0, tzinfo=UTC), 1),
    ("Fix leaking tap in 4B", TaskStatus.IN_PROGRESS, datetime(2025, 10, 15, 14, 0, tzinfo=UTC), 2),
    # 2025-11-01 00:30 in Asia/Ho_Chi_Minh, still 2025-10-31 in UTC
    ("Clean rooftop drains", TaskStatus.OPEN, datetime(2025, 10, 31, 17, 30, tzinfo=UTC), 2),
    ("Repaint parking lines", TaskStatus.REJECTED, datetime(2025, 11, 2, 10, 0, tzinfo=UTC), None),
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def main() -> None:
    _load_env()
    database._ensure_engine()
    if database.engine is None or database.AsyncSessionLocal is None:
        print("DATABASE_URL is not configured", file=sys.stderr)
        sys.exit(1)

    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            owner = User(name="Building Owner", email="owner@example.com")
            techs = [
                User(name="Alice Nguyen", email="alice@example.com"),
                User(name="Bao Tran", email="bao@example.com"),
            ]
            session.add_all([owner, *techs])
            await session.flush()

            building = Building(name="Riverside Tower", address="12 Ton Duc Thang", user_id=owner.id)
            session.add(building)
            await session.flush()

            people = [owner, *techs]
            for title, status, created_at, assignee in _TASKS:
                task = Task(
                    building_id=building.id,
                    created_by=owner.id,
                    assigned_to=people[assignee].id if assignee is not None else None,
                    title=title,
                    status=status,
                    created_at=created_at,
                    updated_at=created_at,
                )
                session.add(task)
                await session.flush()
                session.add(
                    TaskComment(task_id=task.id, created_by=owner.id, body=f"Logged: {title}")
                )

    print(f"Seeded building {building.id} with {len(_TASKS)} tasks")
    print(f"Owner token: {create_access_token({'sub': str(owner.id)})}")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())

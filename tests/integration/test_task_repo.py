"""TaskRepository + TaskQueryFilter against a real (SQLite) database."""

from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select

from app.application.dtos.task import FilterCriteria, TaskCreate
from app.application.filters import TaskQueryFilter
from app.domain.enums import TaskStatus
from app.domain.exceptions import InvalidDateException, InvalidTimezoneException
from app.infrastructure.persistence.models import Task
from app.infrastructure.persistence.repositories import (
    BuildingRepository,
    TaskCommentRepository,
    TaskRepository,
    UserRepository,
)


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=UTC)


async def _filtered_ids(db_session, **criteria) -> list[int]:
    repo = TaskRepository(db_session)
    query = TaskQueryFilter(FilterCriteria(**criteria)).apply(repo.query_all())
    return await repo.list_ids(query)


async def test_empty_filters_return_all_tasks(factory, db_session) -> None:
    building = await factory.building()
    tasks = [await factory.task(building) for _ in range(3)]
    assert await _filtered_ids(db_session) == [t.id for t in tasks]


async def test_filter_by_status(factory, db_session) -> None:
    building = await factory.building()
    open_task = await factory.task(building, status=TaskStatus.OPEN)
    await factory.task(building, status=TaskStatus.COMPLETED)
    assert await _filtered_ids(db_session, status="Open") == [open_task.id]


@pytest.mark.parametrize("status", ["completed", "COMPLETED", "Completed"])
async def test_status_is_case_insensitive_in_sql(factory, db_session, status: str) -> None:
    building = await factory.building()
    done = await factory.task(building, status=TaskStatus.COMPLETED)
    await factory.task(building, status=TaskStatus.IN_PROGRESS)
    assert await _filtered_ids(db_session, status=status) == [done.id]


async def test_filter_by_assigned_to(factory, db_session) -> None:
    building = await factory.building()
    alice, bob = await factory.user(), await factory.user()
    task_a = await factory.task(building, assigned_to=alice.id)
    await factory.task(building, assigned_to=bob.id)
    assert await _filtered_ids(db_session, assigned_to=alice.id) == [task_a.id]


async def test_created_from_is_inclusive_at_utc_midnight(factory, db_session) -> None:
    building = await factory.building()
    inside = await factory.task(building, created_at=_utc(2025, 11, 2, 0, 0, 0))
    before = await factory.task(building, created_at=_utc(2025, 11, 1, 23, 59, 59))
    ids = await _filtered_ids(db_session, created_from="2025-11-02")
    assert inside.id in ids
    assert before.id not in ids


async def test_created_to_covers_whole_day(factory, db_session) -> None:
    building = await factory.building()
    inside = await factory.task(building, created_at=_utc(2025, 11, 2, 23, 59, 59))
    after = await factory.task(building, created_at=_utc(2025, 11, 3, 0, 0, 0))
    ids = await _filtered_ids(db_session, created_to="2025-11-02")
    assert inside.id in ids
    assert after.id not in ids


async def test_date_range_scenario(factory, db_session) -> None:
    building = await factory.building()
    october = await factory.task(building, created_at=_utc(2025, 10, 10, 8, 0))
    await factory.task(building, created_at=_utc(2025, 9, 25, 8, 0))
    ids = await _filtered_ids(
        db_session, created_from="2025-10-01", created_to="2025-10-31"
    )
    assert ids == [october.id]


async def test_date_range_in_client_timezone(factory, db_session) -> None:
    """2025-11-01 in Asia/Ho_Chi_Minh starts at 2025-10-31T17:00Z."""
    building = await factory.building()
    local_morning = await factory.task(building, created_at=_utc(2025, 10, 31, 17, 0))
    utc_evening_before = await factory.task(building, created_at=_utc(2025, 10, 31, 16, 59, 59))
    local_late = await factory.task(building, created_at=_utc(2025, 11, 1, 16, 59, 59))
    next_local_day = await factory.task(building, created_at=_utc(2025, 11, 1, 17, 0))
    ids = await _filtered_ids(
        db_session,
        created_from="2025-11-01",
        created_to="2025-11-01",
        timezone="Asia/Ho_Chi_Minh",
    )
    assert ids == [local_morning.id, local_late.id]
    assert utc_evening_before.id not in ids
    assert next_local_day.id not in ids


async def test_timezone_alone_returns_everything(factory, db_session) -> None:
    building = await factory.building()
    tasks = [await factory.task(building) for _ in range(3)]
    assert await _filtered_ids(db_session, timezone="Asia/Ho_Chi_Minh") == [t.id for t in tasks]


async def test_all_filters_combined(factory, db_session) -> None:
    building = await factory.building()
    user = await factory.user()
    match = await factory.task(
        building,
        status=TaskStatus.IN_PROGRESS,
        assigned_to=user.id,
        created_at=_utc(2025, 10, 15, 12, 0),
    )
    await factory.task(
        building, status=TaskStatus.COMPLETED, assigned_to=user.id, created_at=_utc(2025, 10, 15)
    )
    await factory.task(building, status=TaskStatus.IN_PROGRESS, created_at=_utc(2025, 10, 15))
    await factory.task(
        building,
        status=TaskStatus.IN_PROGRESS,
        assigned_to=user.id,
        created_at=_utc(2025, 9, 15),
    )
    ids = await _filtered_ids(
        db_session,
        status="in progress",
        assigned_to=user.id,
        created_from="2025-10-01",
        created_to="2025-10-31",
    )
    assert ids == [match.id]


async def test_injection_attempt_matches_nothing_and_leaves_table(factory, db_session) -> None:
    building = await factory.building()
    await factory.task(building, status=TaskStatus.COMPLETED)
    await factory.task(building, status=TaskStatus.OPEN)
    ids = await _filtered_ids(db_session, status="Completed';DROP TABLE task--")
    assert ids == []
    total = (await db_session.execute(select(func.count()).select_from(Task))).scalar_one()
    assert total == 2


async def test_invalid_inputs_raise_before_query(db_session) -> None:
    with pytest.raises(InvalidTimezoneException):
        await _filtered_ids(db_session, timezone="Invalid/Zone", created_from="2025-11-01")
    with pytest.raises(InvalidDateException):
        await _filtered_ids(db_session, created_from="2025/10/01")


async def test_query_for_building_scopes_tasks(factory, db_session) -> None:
    mine, other = await factory.building(), await factory.building(name="Other")
    task = await factory.task(mine)
    await factory.task(other)
    repo = TaskRepository(db_session)
    assert await repo.list_ids(repo.query_for_building(mine.id)) == [task.id]


async def test_paginate_orders_by_id_and_loads_relations(factory, db_session) -> None:
    building = await factory.building()
    creator = await factory.user(name="Creator")
    assignee = await factory.user(name="Assignee")
    tasks = [
        await factory.task(building, created_by=creator.id, assigned_to=assignee.id)
        for _ in range(3)
    ]
    await factory.comment(tasks[0], "first", created_by=creator.id)
    await factory.comment(tasks[0], "second")

    repo = TaskRepository(db_session)
    page = await repo.paginate(repo.query_for_building(building.id), page=1, per_page=2)
    assert page.total == 3
    assert page.last_page == 2
    assert [t.id for t in page.items] == [tasks[0].id, tasks[1].id]
    first = page.items[0]
    assert first.creator.name == "Creator"
    assert first.assignee.name == "Assignee"
    assert [c.body for c in first.comments] == ["first", "second"]
    assert first.comments[0].creator.id == creator.id
    assert first.created_at.tzinfo is not None

    second_page = await repo.paginate(repo.query_for_building(building.id), page=2, per_page=2)
    assert [t.id for t in second_page.items] == [tasks[2].id]


async def test_create_task_and_comment(factory, db_session) -> None:
    owner = await factory.user()
    building = await BuildingRepository(db_session).create_building("Annex", user_id=owner.id)
    assignee = await UserRepository(db_session).create_user("Dana", "dana@example.com")
    task_repo = TaskRepository(db_session)

    created = await task_repo.create_task(
        building.id,
        TaskCreate(title="Replace filters", assigned_to=assignee.id),
        created_by=owner.id,
    )
    assert created.status is TaskStatus.OPEN
    assert created.assignee.email == "dana@example.com"
    assert created.comments == ()

    comment = await TaskCommentRepository(db_session).create_comment(
        created.id, "Ordered parts", owner.id
    )
    assert comment.task_id == created.id
    assert comment.creator.id == owner.id

    reloaded = await task_repo.get_result_by_id(created.id)
    assert [c.body for c in reloaded.comments] == ["Ordered parts"]
    assert await task_repo.exists(created.id)
    assert not await task_repo.exists(created.id + 1000)

from datetime import datetime, timedelta, timezone

import pytest

from drivesafe.enums import SessionStatus
from drivesafe.exceptions.errors import NotFoundError
from drivesafe.schemas.drive_session_schemas import DriveSessionSummary, SpeedSampleRequest
from drivesafe.services.drive_session_service import DriveSessionService
from drivesafe.utils.user_locks import UserLockRegistry


async def test_record_speed_without_active_session_is_not_found(service, clock):
    with pytest.raises(NotFoundError):
        await service.record_speed("u1", SpeedSampleRequest(speed=12.0, timestamp=clock.now))


async def test_record_speed_binds_sample_to_active_session(service, clock):
    session = await service.start_session("u1")

    sample = await service.record_speed(
        "u1",
        SpeedSampleRequest(speed=48.3, latitude=6.5244, longitude=3.3792, timestamp=clock.now)
    )

    assert sample.id
    assert sample.session_id == session.id
    assert sample.speed == 48.3
    assert sample.latitude == 6.5244
    assert sample.longitude == 3.3792
    assert sample.timestamp == clock.now


async def test_record_speed_stores_values_as_sent(service, clock):
    await service.start_session("u1")

    sample = await service.record_speed(
        "u1",
        SpeedSampleRequest(speed=-3.0, latitude=123.0, longitude=None, timestamp=clock.now)
    )

    assert sample.speed == -3.0
    assert sample.latitude == 123.0
    assert sample.longitude is None


async def test_record_speed_after_end_is_not_found(service, clock):
    await service.start_session("u1")
    await service.end_session("u1")

    with pytest.raises(NotFoundError):
        await service.record_speed("u1", SpeedSampleRequest(speed=12.0, timestamp=clock.now))


async def test_aware_timestamps_are_stored_as_utc(service):
    await service.start_session("u1")
    local = datetime(2025, 10, 19, 10, 0, 0, tzinfo=timezone(timedelta(hours=1)))

    sample = await service.record_speed("u1", SpeedSampleRequest(speed=10.0, timestamp=local))

    assert sample.timestamp == datetime(2025, 10, 19, 9, 0, 0)


async def test_history_is_newest_first(service, clock):
    ids = []
    for _ in range(3):
        ids.append((await service.start_session("u1")).id)
        clock.advance(minutes=10)
        await service.end_session("u1")
        clock.advance(hours=1)

    history = await service.list_history("u1")

    assert [h.id for h in history] == list(reversed(ids))
    assert all(isinstance(h, DriveSessionSummary) for h in history)
    assert all(h.status == SessionStatus.COMPLETED for h in history)
    assert all(h.duration_minutes == 10 for h in history)


async def test_history_includes_active_session_and_only_own_sessions(service, clock):
    await service.start_session("u1")
    clock.advance(minutes=1)
    await service.end_session("u1")
    clock.advance(minutes=1)
    active = await service.start_session("u1")
    await service.start_session("u2")

    history = await service.list_history("u1")

    assert len(history) == 2
    assert history[0].id == active.id
    assert history[0].status == SessionStatus.ACTIVE


async def test_history_summary_has_no_sample_detail(service):
    await service.start_session("u1")

    summary = (await service.list_history("u1"))[0]

    assert set(summary.model_dump()) == {
        "id", "start_time", "end_time", "max_speed", "avg_speed",
        "distance_traveled", "duration_minutes", "status",
    }


async def test_history_of_unknown_user_is_empty(service):
    assert await service.list_history("nobody") == []


async def test_get_active_session_absent_is_none(service):
    assert await service.get_active_session("u1") is None


async def test_get_active_session_returns_session(service):
    session = await service.start_session("u1")

    active = await service.get_active_session("u1")

    assert active.id == session.id


async def test_get_active_session_is_none_after_end(service):
    await service.start_session("u1")
    await service.end_session("u1")

    assert await service.get_active_session("u1") is None


async def test_list_samples_in_capture_order(service, clock):
    session = await service.start_session("u1")
    base = clock.now
    # Arrive out of order
    for offset, speed in ((20, 30.0), (0, 10.0), (10, 20.0)):
        await service.record_speed(
            "u1", SpeedSampleRequest(speed=speed, timestamp=base + timedelta(seconds=offset))
        )

    samples = await service.list_samples("u1", session.id)

    assert [s.speed for s in samples] == [10.0, 20.0, 30.0]


async def test_list_samples_of_other_users_session_is_not_found(service):
    session = await service.start_session("u1")

    with pytest.raises(NotFoundError):
        await service.list_samples("u2", session.id)


async def test_record_speed_loses_to_end_that_commits_after_lookup(service, session_factory, clock):
    await service.start_session("u1")
    lookup = service.sessions.find_active_by_user

    async def lookup_then_end_elsewhere(user_id):
        session = await lookup(user_id)
        async with session_factory() as other_db:
            await DriveSessionService(other_db, clock=clock, locks=UserLockRegistry()).end_session(user_id)
        return session

    service.sessions.find_active_by_user = lookup_then_end_elsewhere

    with pytest.raises(NotFoundError):
        await service.record_speed("u1", SpeedSampleRequest(speed=150.0, timestamp=clock.now))

    async with session_factory() as db:
        reader = DriveSessionService(db)
        closed = (await reader.list_history("u1"))[0]
        samples = await reader.list_samples("u1", closed.id)
    assert closed.status == SessionStatus.COMPLETED
    assert closed.max_speed == 0
    assert samples == []

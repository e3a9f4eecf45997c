import pytest

from rcss_sidecar.status import (
    GAME_END_TIMESTEP,
    ProcessState,
    ProcessStatus,
    SidecarStatus,
    SidecarStatusTracker,
    next_sidecar_status,
)


def test_process_status_ord_follows_life_cycle():
    orders = [ProcessStatus(state).ord() for state in ProcessState]
    assert orders == sorted(orders)
    assert ProcessStatus().ord() == 0
    assert ProcessStatus(ProcessState.DEAD, error="boom").ord() == 4


def test_process_status_ready_only_when_running():
    assert ProcessStatus(ProcessState.RUNNING).is_ready()
    for state in (ProcessState.INIT, ProcessState.BOOTING, ProcessState.RETURNED):
        assert not ProcessStatus(state).is_ready()


def test_process_status_finished():
    assert not ProcessStatus(ProcessState.RETURNED, returncode=0).is_finished()
    assert ProcessStatus(ProcessState.RETURNED, returncode=1).is_finished()
    assert ProcessStatus(ProcessState.DEAD, error="x").is_finished()
    assert not ProcessStatus(ProcessState.RUNNING).is_finished()


def test_sidecar_status_round_trips_through_int():
    for status in SidecarStatus:
        assert SidecarStatus(int(status)) is status
    assert int(SidecarStatus.SIMULATING) == 2
    with pytest.raises(ValueError):
        SidecarStatus(4)


def test_sidecar_status_predicates():
    assert SidecarStatus.SIMULATING.is_running()
    assert not SidecarStatus.IDLE.is_running()
    assert SidecarStatus.IDLE.is_idle()
    assert not SidecarStatus.FINISHED.is_idle()


@pytest.mark.parametrize(
    "current, timestep, expected",
    [
        (SidecarStatus.UNINITIALIZED, 0, SidecarStatus.IDLE),
        (SidecarStatus.UNINITIALIZED, 1, SidecarStatus.SIMULATING),
        (SidecarStatus.UNINITIALIZED, GAME_END_TIMESTEP, SidecarStatus.SIMULATING),
        (SidecarStatus.IDLE, 1, SidecarStatus.SIMULATING),
        (SidecarStatus.IDLE, GAME_END_TIMESTEP - 1, SidecarStatus.SIMULATING),
        (SidecarStatus.IDLE, GAME_END_TIMESTEP, SidecarStatus.FINISHED),
        (SidecarStatus.SIMULATING, GAME_END_TIMESTEP, SidecarStatus.FINISHED),
        (SidecarStatus.IDLE, 0, None),
        (SidecarStatus.SIMULATING, 1, None),
        (SidecarStatus.FINISHED, GAME_END_TIMESTEP, None),
        (SidecarStatus.UNINITIALIZED, None, None),
    ],
)
def test_next_sidecar_status(current, timestep, expected):
    assert next_sidecar_status(current, timestep) is expected


def test_tracker_update_and_close():
    tracker = SidecarStatusTracker()
    assert tracker.update(0) is SidecarStatus.IDLE
    assert tracker.update(None) is SidecarStatus.IDLE
    assert tracker.update(1) is SidecarStatus.SIMULATING
    assert tracker.status is SidecarStatus.SIMULATING
    assert tracker.close() is SidecarStatus.FINISHED
    assert tracker.status is SidecarStatus.FINISHED


def test_tracker_status_can_be_set():
    tracker = SidecarStatusTracker()
    tracker.status = SidecarStatus.IDLE
    assert tracker.update(GAME_END_TIMESTEP) is SidecarStatus.FINISHED


async def _steps(values):
    for value in values:
        yield value


async def _recording(values, tracker, seen):
    for value in values:
        yield value
        seen.append(tracker.status)


@pytest.mark.asyncio
async def test_track_finishes_when_stream_ends():
    tracker = SidecarStatusTracker()
    result = await tracker.track(_steps([0, 5]))
    assert result is SidecarStatus.FINISHED
    assert tracker.status is SidecarStatus.FINISHED


@pytest.mark.asyncio
async def test_track_follows_transitions():
    seen = []
    tracker = SidecarStatusTracker()
    result = await tracker.track(
        _recording([0, 10, GAME_END_TIMESTEP], tracker, seen)
    )
    assert result is SidecarStatus.FINISHED
    assert seen == [
        SidecarStatus.IDLE,
        SidecarStatus.SIMULATING,
        SidecarStatus.FINISHED,
    ]
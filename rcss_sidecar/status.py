"""States of the simulator process and of the sidecar that drives it."""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import AsyncIterable, Optional

logger = logging.getLogger(__name__)

GAME_END_TIMESTEP = 6000


class ProcessState(enum.Enum):
    """Life-cycle stage of a simulator process."""

    INIT = 0
    BOOTING = 1
    RUNNING = 2
    RETURNED = 3
    DEAD = 4


@dataclass(frozen=True)
class ProcessStatus:
    """A process state with the return code or error that ended it."""

    state: ProcessState = ProcessState.INIT
    returncode: Optional[int] = None
    error: Optional[str] = None

    def is_finished(self) -> bool:
        """True when the process failed: a non-zero return or a dead wait."""
        if self.state is ProcessState.RETURNED:
            return self.returncode != 0
        return self.state is ProcessState.DEAD

    def is_ready(self) -> bool:
        """True once the process accepts connections."""
        return self.state is ProcessState.RUNNING

    def ord(self) -> int:
        """Position of the state in the life cycle."""
        return self.state.value


class SidecarStatus(enum.IntEnum):
    """What the sidecar's simulation is doing."""

    UNINITIALIZED = 0
    IDLE = 1
    SIMULATING = 2
    FINISHED = 3

    def is_running(self) -> bool:
        return self is SidecarStatus.SIMULATING

    def is_idle(self) -> bool:
        return self is SidecarStatus.IDLE


def next_sidecar_status(
    current: SidecarStatus, timestep: Optional[int]
) -> Optional[SidecarStatus]:
    """The status that a reported timestep leads to, or None for no change."""
    if timestep is None:
        return None
    if current is SidecarStatus.UNINITIALIZED:
        return SidecarStatus.IDLE if timestep == 0 else SidecarStatus.SIMULATING
    if current is SidecarStatus.IDLE:
        if 0 < timestep < GAME_END_TIMESTEP:
            return SidecarStatus.SIMULATING
        if timestep >= GAME_END_TIMESTEP:
            return SidecarStatus.FINISHED
        return None
    if current is SidecarStatus.SIMULATING and timestep >= GAME_END_TIMESTEP:
        return SidecarStatus.FINISHED
    return None


class SidecarStatusTracker:
    """Thread-safe holder of a sidecar status driven by simulator timesteps."""

    def __init__(self, status: SidecarStatus = SidecarStatus.UNINITIALIZED) -> None:
        self._lock = threading.Lock()
        self._status = SidecarStatus(status)

    @property
    def status(self) -> SidecarStatus:
        with self._lock:
            return self._status

    @status.setter
    def status(self, value: SidecarStatus) -> None:
        with self._lock:
            self._status = SidecarStatus(value)

    def update(self, timestep: Optional[int]) -> SidecarStatus:
        """Apply one reported timestep and return the resulting status."""
        with self._lock:
            nxt = next_sidecar_status(self._status, timestep)
            if nxt is not None:
                logger.debug("Status tracking: %s -> %s", self._status.name, nxt.name)
                self._status = nxt
            return self._status

    def close(self) -> SidecarStatus:
        """Mark the simulation finished because its time source has ended."""
        with self._lock:
            self._status = SidecarStatus.FINISHED
            return self._status

    async def track(self, timesteps: AsyncIterable[Optional[int]]) -> SidecarStatus:
        """Follow a stream of timesteps; finish when the stream ends."""
        async for timestep in timesteps:
            self.update(timestep)
        logger.debug("Status tracking ended: time source closed.")
        return self.close()
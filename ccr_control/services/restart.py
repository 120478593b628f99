"""Deferred process restart.

A restart request is acknowledged first and acted on later:

    IDLE -> ACK_SENT -> (delay) -> SPAWN_ATTEMPTED -> SPAWNED | SPAWN_FAILED

``request_restart`` performs the first transition and returns the
acknowledgement. ``run_scheduled`` performs the rest and is meant to run
after the response has gone out (a background task). A spawn failure is
logged and nothing else: the caller already has its answer.
"""

import logging
import subprocess
import time
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

from ..core.config import RESTART_COMMAND, RESTART_DELAY_SECONDS

logger = logging.getLogger(__name__)

RESTART_MESSAGE = "Service restart initiated"


class RestartState(str, Enum):
    IDLE = "idle"
    ACK_SENT = "ack_sent"
    SPAWN_ATTEMPTED = "spawn_attempted"
    SPAWNED = "spawned"
    SPAWN_FAILED = "spawn_failed"


def spawn_detached(command: Sequence[str]) -> subprocess.Popen:
    """Start ``command`` in its own session with all standard streams discarded."""
    return subprocess.Popen(
        list(command),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class RestartCoordinator:
    def __init__(
        self,
        command: Sequence[str] = RESTART_COMMAND,
        delay: float = RESTART_DELAY_SECONDS,
        spawner: Callable[[Sequence[str]], Any] = spawn_detached,
        sleeper: Callable[[float], None] = time.sleep,
    ):
        self.command = tuple(command)
        self.delay = delay
        self._spawner = spawner
        self._sleeper = sleeper
        self.state = RestartState.IDLE
        self.last_error: Optional[BaseException] = None

    def request_restart(self) -> Dict[str, Any]:
        """Acknowledge unconditionally; the spawn happens in ``run_scheduled``."""
        self.state = RestartState.ACK_SENT
        self.last_error = None
        logger.info("Restart requested, running %r in %.1fs", " ".join(self.command), self.delay)
        return {"success": True, "message": RESTART_MESSAGE}

    def run_scheduled(self) -> RestartState:
        """Wait out the delay, then spawn the restart command once."""
        if self.state is not RestartState.ACK_SENT:
            logger.debug("No acknowledged restart pending (state=%s)", self.state.value)
            return self.state

        self._sleeper(self.delay)
        self.state = RestartState.SPAWN_ATTEMPTED
        try:
            self._spawner(self.command)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            # Fire-and-forget: there is no caller left to report to.
            self.state = RestartState.SPAWN_FAILED
            self.last_error = e
            logger.exception("Failed to spawn restart command %r", " ".join(self.command))
            return self.state

        self.state = RestartState.SPAWNED
        logger.info("Spawned restart command %r", " ".join(self.command))
        return self.state

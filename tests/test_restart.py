"""
Unit tests for the two-phase restart coordinator.
"""

import subprocess
from unittest.mock import patch

from ccr_control.services import restart as restart_module
from ccr_control.services.restart import RestartCoordinator, RestartState, spawn_detached


def test_ack_is_sent_before_any_spawn(coordinator, spawner, sleeps):
    ack = coordinator.request_restart()

    assert ack == {"success": True, "message": "Service restart initiated"}
    assert coordinator.state is RestartState.ACK_SENT
    assert spawner.calls == []
    assert sleeps == []


def test_spawn_happens_after_delay(coordinator, spawner, sleeps):
    coordinator.request_restart()

    assert coordinator.run_scheduled() is RestartState.SPAWNED
    assert sleeps == [1.0]
    assert spawner.calls == [("ccr", "restart")]


def test_delay_elapses_before_spawn():
    events = []
    coordinator = RestartCoordinator(
        delay=1.0,
        spawner=lambda cmd: events.append(("spawn", tuple(cmd))),
        sleeper=lambda seconds: events.append(("sleep", seconds)),
    )
    coordinator.request_restart()
    coordinator.run_scheduled()

    assert events == [("sleep", 1.0), ("spawn", ("ccr", "restart"))]


def test_spawn_failure_is_terminal_and_logged(sleeps, caplog):
    error = FileNotFoundError("ccr: command not found")
    def fail(command):
        raise error

    coordinator = RestartCoordinator(spawner=fail, sleeper=sleeps.append)

    ack = coordinator.request_restart()
    with caplog.at_level("ERROR", logger="ccr_control"):
        state = coordinator.run_scheduled()

    assert ack["success"] is True
    assert state is RestartState.SPAWN_FAILED
    assert coordinator.last_error is error
    assert "Failed to spawn restart command" in caplog.text


def test_run_without_request_does_nothing(coordinator, spawner, sleeps):
    assert coordinator.run_scheduled() is RestartState.IDLE
    assert spawner.calls == []
    assert sleeps == []


def test_run_only_once_per_request(coordinator, spawner):
    coordinator.request_restart()
    coordinator.run_scheduled()
    coordinator.run_scheduled()
    assert len(spawner.calls) == 1

    coordinator.request_restart()
    coordinator.run_scheduled()
    assert len(spawner.calls) == 2


def test_spawn_detached_discards_io_and_starts_new_session():
    with patch.object(restart_module.subprocess, "Popen") as popen:
        spawn_detached(("ccr", "restart"))

    popen.assert_called_once_with(
        ["ccr", "restart"],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )

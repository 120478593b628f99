"""Dependency providers resolving collaborators stored on ``app.state``."""

from fastapi import Request

from ..services.control import ControlService
from ..services.restart import RestartCoordinator


def get_control_service(request: Request) -> ControlService:
    return request.app.state.control_service


def get_restart_coordinator(request: Request) -> RestartCoordinator:
    return request.app.state.restart_coordinator

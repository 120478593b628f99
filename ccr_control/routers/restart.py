"""Process restart endpoint.

Exposes:
- POST /api/restart: acknowledge now, spawn the restart command once the
  response has been sent and the configured delay has passed
"""

from fastapi import APIRouter, BackgroundTasks, Depends

from ..core.models_io import ActionResult
from ..services.restart import RestartCoordinator
from .deps import get_restart_coordinator

router = APIRouter(prefix="/api")


@router.post("/restart", response_model=ActionResult)
def restart(
    background_tasks: BackgroundTasks,
    coordinator: RestartCoordinator = Depends(get_restart_coordinator),
):
    ack = coordinator.request_restart()
    # Background tasks run after the response is fully sent
    background_tasks.add_task(coordinator.run_scheduled)
    return ack

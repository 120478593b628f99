"""Configuration endpoints.

Exposes:
- GET  /api/config: the full stored configuration, unredacted
- POST /api/config: back up the current file and replace it with the body
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from ..core.errors import NotFoundError, ParseError, WriteError
from ..core.models_io import ActionResult
from ..services.control import ControlService
from .deps import get_control_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/config")
def read_config(service: ControlService = Depends(get_control_service)) -> Dict[str, Any]:
    try:
        return service.get_config()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ParseError as e:
        logger.error("Stored config is unreadable: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/config", response_model=ActionResult)
def save_config(
    candidate: Dict[str, Any] = Body(...),
    service: ControlService = Depends(get_control_service),
):
    try:
        return service.save_config(candidate)
    except WriteError as e:
        logger.error("Config save failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

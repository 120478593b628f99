"""Transformer listing endpoint.

Exposes:
- GET /api/transformers: name and endpoint of each loaded transformer
"""

from fastapi import APIRouter, Depends

from ..core.models_io import TransformersResponse
from ..services.control import ControlService
from .deps import get_control_service

router = APIRouter(prefix="/api")


@router.get("/transformers", response_model=TransformersResponse)
def list_transformers(service: ControlService = Depends(get_control_service)):
    return {"transformers": service.list_transformers()}

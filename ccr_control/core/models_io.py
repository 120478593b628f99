"""Pydantic response schemas used by the API.

These align with the UI so payloads stay compatible across direct API
calls and the web client. Request bodies for ``POST /api/config`` are
deliberately not modelled: the configuration is an opaque mapping.
"""

from typing import List, Optional
from pydantic import BaseModel


class ActionResult(BaseModel):
    """Outcome of a mutating call (save, restart)."""
    success: bool
    message: str


class TransformerInfo(BaseModel):
    """A named transformer and the endpoint it serves, if any."""
    name: str
    endpoint: Optional[str] = None


class TransformersResponse(BaseModel):
    transformers: List[TransformerInfo]

"""App factory and ASGI entrypoint for the control-plane API.

- Wires the config store, backup manager and transformer registry into a
  ControlService kept on ``app.state``
- Registers routers for config, transformers and restart endpoints
- Serves the built UI under `/ui/` (cached for an hour) and redirects `/ui` there
"""

import logging
from typing import Optional

from fastapi import FastAPI
from starlette.responses import RedirectResponse
from starlette.staticfiles import StaticFiles

from .core.config import UI_MAX_AGE_SECONDS, Settings
from .routers import config, restart, transformers
from .services.control import ControlService
from .services.restart import RestartCoordinator
from .services.transformers import InMemoryTransformerRegistry, TransformerRegistry
from .storage import BackupManager, ConfigStore

logger = logging.getLogger(__name__)


class CachedStaticFiles(StaticFiles):
    """StaticFiles that marks every asset response cacheable."""

    def __init__(self, *args, max_age: int = UI_MAX_AGE_SECONDS, **kwargs):
        self.max_age = max_age
        super().__init__(*args, **kwargs)

    def file_response(self, *args, **kwargs):
        response = super().file_response(*args, **kwargs)
        response.headers["Cache-Control"] = f"public, max-age={self.max_age}"
        return response


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[TransformerRegistry] = None,
    coordinator: Optional[RestartCoordinator] = None,
) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Claude Code Router Control API",
        version="1.0.0",
        description="Read and update the router configuration and restart the service",
    )

    store = ConfigStore(settings.config_file)
    app.state.settings = settings
    app.state.control_service = ControlService(
        store=store,
        backups=BackupManager(settings.config_file),
        registry=registry if registry is not None else InMemoryTransformerRegistry(),
    )
    app.state.restart_coordinator = coordinator or RestartCoordinator(
        command=settings.restart_command,
        delay=settings.restart_delay,
    )

    # Register routers
    app.include_router(config.router)
    app.include_router(transformers.router)
    app.include_router(restart.router)

    # Redirect /ui -> /ui/
    @app.get("/ui", include_in_schema=False)
    def ui_redirect():
        return RedirectResponse(url="/ui/", status_code=307)

    # Static UI
    if settings.ui_dir.is_dir():
        app.mount("/ui", CachedStaticFiles(directory=str(settings.ui_dir), html=True), name="ui")
    else:
        logger.info("UI assets not found at %s; /ui/ will not be served", settings.ui_dir)

    logger.debug("Control API configured for %s", settings.config_file)
    return app


# ASGI entrypoint (uvicorn: `uvicorn ccr_control.main:app`)
app = create_app()

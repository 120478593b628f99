"""Command-line entry point: run the control API under uvicorn."""

from typing import Optional

import click
import uvicorn

from . import __version__
from .core.config import DEFAULT_HOST, DEFAULT_PORT, Settings
from .core.log import configure_logging
from .main import create_app


@click.command()
@click.version_option(version=__version__, prog_name="ccr-control")
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Interface to bind")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="Port to listen on")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Overrides CCR_LOG_LEVEL (default INFO)",
)
def main(host: str, port: int, log_level: Optional[str]) -> None:
    """Serve the configuration and restart API."""
    settings = Settings()
    level = (log_level or settings.log_level).upper()
    configure_logging(level)
    uvicorn.run(create_app(settings=settings), host=host, port=port, log_level=level.lower())


if __name__ == "__main__":
    main()

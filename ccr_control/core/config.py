"""Service-wide configuration.

Defines the on-disk locations the control plane reads and writes, plus the
restart command and listen address defaults. ``Settings`` lets each of them
be overridden with a ``CCR_``-prefixed environment variable so tests and
side-by-side installs never touch the user's real home directory.
"""

from pathlib import Path
from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOME_DIR = Path.home() / ".claude-code-router"
CONFIG_FILE_NAME = "config.json"

# Built UI assets served under /ui/
DEFAULT_UI_DIST_DIR = Path(__file__).resolve().parent.parent / "ui" / "dist"
UI_MAX_AGE_SECONDS = 3600

RESTART_COMMAND: Tuple[str, ...] = ("ccr", "restart")
RESTART_DELAY_SECONDS = 1.0

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3456
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """Resolved locations and knobs for one app instance.

    Environment variables: CCR_HOME, CCR_UI_DIR, CCR_LOG_LEVEL,
    CCR_RESTART_COMMAND (JSON list), CCR_RESTART_DELAY.
    """

    home: Path = Field(default_factory=lambda: DEFAULT_HOME_DIR, description="Router home directory")
    ui_dir: Path = Field(DEFAULT_UI_DIST_DIR, description="Built UI assets")
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Logging level for the ccr_control logger")
    restart_command: Tuple[str, ...] = Field(RESTART_COMMAND, description="Command spawned on restart")
    restart_delay: float = Field(RESTART_DELAY_SECONDS, ge=0, description="Seconds between ack and spawn")

    model_config = SettingsConfigDict(env_prefix="CCR_", case_sensitive=False, extra="ignore")

    @property
    def config_file(self) -> Path:
        return self.home / CONFIG_FILE_NAME

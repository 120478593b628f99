"""Crash-safe persistence of the JSON configuration file.

Writes go to a temporary file in the target directory, are fsynced, and are
then swapped into place with ``os.replace``. A crash or I/O error at any
point leaves either the old file or the new one, never a partial write.
"""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

from ..core.errors import NotFoundError, ParseError, WriteError

logger = logging.getLogger(__name__)


def _fsync_dir(path: Path) -> None:
    # Directory fsync is unsupported on some platforms (Windows); the rename
    # itself is still atomic there.
    try:
        fd = os.open(str(path), os.O_RDONLY)
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError:
        pass
    finally:
        os.close(fd)


class ConfigStore:
    """Owns the canonical configuration file path."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Dict[str, Any]:
        """Load and parse the configuration file.

        Every call hits the disk so callers always see the latest
        persisted state.

        Raises:
            NotFoundError: the file does not exist
            ParseError: the file cannot be read or is not a JSON object
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError("Config file not found", self.path, e)
        except UnicodeDecodeError as e:
            raise ParseError("Config file is not valid UTF-8", self.path, e)
        except OSError as e:
            # Permission denied, path is a directory, ...
            raise ParseError(f"Config file is unreadable ({e.strerror or e})", self.path, e)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON at line {e.lineno} column {e.colno}", self.path, e)

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}", self.path)
        return data

    def write(self, cfg: Dict[str, Any]) -> None:
        """Serialize ``cfg`` and atomically replace the configuration file.

        Raises:
            WriteError: serialization failed or the file could not be persisted;
                the previous file is left untouched
        """
        try:
            text = json.dumps(cfg, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise WriteError(f"Config is not serializable ({e})", self.path, e)

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent))
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            self._preserve_mode(tmp_path)
            os.replace(str(tmp_path), str(self.path))
            tmp_path = None
        except OSError as e:
            raise WriteError("Failed to write config file", self.path, e)
        finally:
            if tmp_path is not None:
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_path)

        _fsync_dir(self.path.parent)
        logger.debug("Wrote %d bytes to %s", len(text), self.path)

    def _preserve_mode(self, tmp_path: Path) -> None:
        # mkstemp creates 0600 files; keep whatever mode the user chose.
        try:
            shutil.copymode(self.path, tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not copy permissions of %s: %s", self.path, e)

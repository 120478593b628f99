"""Append-only snapshots of the configuration file.

A backup is a byte-for-byte copy named ``<config>.<UTC timestamp>.bak``.
Backups are never pruned here; cleanup is left to the operator.
"""

import logging
import re
import shutil
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..core.errors import BackupWarning

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"
_BACKUP_NAME = re.compile(r"^(?P<stamp>\d{4}-\d{2}-\d{2}T[\d-]+Z)(?:-(?P<n>\d+))?\.bak$")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 with ``:`` and ``.`` swapped for ``-`` so it is filename safe."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H-%M-%S-") + f"{moment.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class BackupHandle:
    path: Path
    source: Path
    created_at: datetime


class BackupManager:
    """Creates a new, uniquely named copy of the config file on each call."""

    def __init__(self, source: Union[str, Path], clock: Callable[[], datetime] = _utcnow):
        self.source = Path(source)
        self._clock = clock
        self.last_warning: Optional[BackupWarning] = None

    def backup(self) -> Optional[BackupHandle]:
        """Copy the current configuration file aside.

        Returns the handle of the new backup, or ``None`` when there is no
        file to back up or the copy failed. A failure is logged as a
        ``BackupWarning`` and never raised.
        """
        self.last_warning = None
        if not self.source.is_file():
            logger.debug("No config at %s, skipping backup", self.source)
            return None

        created_at = self._clock()
        stem = f"{self.source.name}.{format_timestamp(created_at)}"
        try:
            target = self._copy_exclusive(stem)
        except OSError as e:
            self.last_warning = BackupWarning(self.source, e)
            logger.warning("%s", self.last_warning)
            return None

        logger.info("Backed up config to %s", target)
        return BackupHandle(path=target, source=self.source, created_at=created_at)

    def _copy_exclusive(self, stem: str) -> Path:
        # Mode "xb" refuses to open an existing path, so a prior backup is
        # never overwritten even when two saves share a timestamp.
        attempt = 0
        with open(self.source, "rb") as src:
            while True:
                suffix = f"-{attempt}" if attempt else ""
                target = self.source.with_name(f"{stem}{suffix}{BACKUP_SUFFIX}")
                try:
                    dst = open(target, "xb")
                except FileExistsError:
                    attempt += 1
                    continue
                try:
                    with dst:
                        shutil.copyfileobj(src, dst)
                except OSError:
                    target.unlink(missing_ok=True)
                    raise
                shutil.copymode(self.source, target)
                return target

    def list_backups(self) -> List[Path]:
        """Existing backups for the source file, oldest first."""
        prefix = f"{self.source.name}."
        found = []
        for path in self.source.parent.glob(f"{prefix}*{BACKUP_SUFFIX}"):
            match = _BACKUP_NAME.match(path.name[len(prefix):])
            if match:
                found.append(((match.group("stamp"), int(match.group("n") or 0)), path))
        return [path for _, path in sorted(found)]

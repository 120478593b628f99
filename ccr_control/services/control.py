"""Control façade: the operations the UI performs on the configuration.

Nothing here knows about HTTP; routers call these methods and translate
errors into responses.
"""

import logging
import threading
from typing import Any, Dict, List

from ..storage.backup import BackupManager
from ..storage.config_store import ConfigStore
from .transformers import TransformerRegistry, endpoint_of

logger = logging.getLogger(__name__)

SAVE_MESSAGE = "Config saved successfully"


class ControlService:
    def __init__(self, store: ConfigStore, backups: BackupManager, registry: TransformerRegistry):
        self.store = store
        self.backups = backups
        self.registry = registry
        # Pairs each backup with the write that follows it
        self._save_lock = threading.Lock()

    def get_config(self) -> Dict[str, Any]:
        """Return the persisted configuration verbatim, credentials included."""
        return self.store.read()

    def save_config(self, candidate: Dict[str, Any]) -> Dict[str, Any]:
        """Back up the current file, then replace it with ``candidate``.

        A missing or failed backup does not stop the save. Write errors
        propagate to the caller.
        """
        with self._save_lock:
            handle = self.backups.backup()
            if handle is None:
                logger.info("Saving config to %s without a backup", self.store.path)
            self.store.write(candidate)
        logger.info("Saved config to %s", self.store.path)
        return {"success": True, "message": SAVE_MESSAGE}

    def list_transformers(self) -> List[Dict[str, Any]]:
        """Project the registry to ``{name, endpoint}`` in enumeration order."""
        transformers = self.registry.get_all_transformers()
        return [
            {"name": name, "endpoint": endpoint_of(descriptor)}
            for name, descriptor in transformers.items()
        ]

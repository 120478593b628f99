"""
Pytest configuration and shared fixtures for control-plane tests.
"""

import json
from pathlib import Path

import pytest

from ccr_control.core.config import Settings
from ccr_control.services.control import ControlService
from ccr_control.services.restart import RestartCoordinator
from ccr_control.services.transformers import InMemoryTransformerRegistry
from ccr_control.storage import BackupManager, ConfigStore


@pytest.fixture
def sample_config():
    """Configuration shaped like a real router config, secrets included."""
    return {
        "APIKEY": "test-api-key",
        "LOG": True,
        "Providers": [
            {
                "name": "testProvider",
                "api_base_url": "https://api.test.com",
                "api_key": "provider-key",
                "models": ["test-model"],
            }
        ],
    }


@pytest.fixture
def config_file(tmp_path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def existing_config(config_file, sample_config) -> Path:
    config_file.write_text(json.dumps(sample_config, indent=2), encoding="utf-8")
    return config_file


@pytest.fixture
def store(config_file):
    return ConfigStore(config_file)


@pytest.fixture
def backups(config_file):
    return BackupManager(config_file)


@pytest.fixture
def registry():
    return InMemoryTransformerRegistry()


@pytest.fixture
def service(store, backups, registry):
    return ControlService(store=store, backups=backups, registry=registry)


class RecordingSpawner:
    """Stands in for subprocess spawning and records each command."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def __call__(self, command):
        self.calls.append(tuple(command))
        if self.error is not None:
            raise self.error


@pytest.fixture
def spawner():
    return RecordingSpawner()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def coordinator(spawner, sleeps):
    return RestartCoordinator(command=("ccr", "restart"), delay=1.0, spawner=spawner, sleeper=sleeps.append)


@pytest.fixture
def settings(config_file, tmp_path):
    return Settings(home=config_file.parent, ui_dir=tmp_path / "ui-dist")

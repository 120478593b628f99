"""
Tests for the persistence error taxonomy.
"""

from ccr_control.core.errors import BackupWarning, ControlPlaneError, NotFoundError, ParseError, WriteError


def test_hierarchy():
    for cls in (NotFoundError, ParseError, WriteError):
        assert issubclass(cls, ControlPlaneError)
    assert issubclass(BackupWarning, UserWarning)
    assert not issubclass(BackupWarning, ControlPlaneError)


def test_str_includes_path():
    assert str(NotFoundError("Config file not found", "/x/config.json")) == "Config file not found: /x/config.json"
    assert str(WriteError("Write failed")) == "Write failed"


def test_to_dict():
    cause = OSError("disk full")
    data = WriteError("Failed to write config file", "/x/config.json", cause).to_dict()
    assert data["error_type"] == "WriteError"
    assert data["error_code"] == "CONFIG_WRITE"
    assert data["path"] == "/x/config.json"
    assert "disk full" in data["cause"]

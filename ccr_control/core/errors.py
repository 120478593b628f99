"""Error taxonomy for configuration persistence.

``NotFoundError``, ``ParseError`` and ``WriteError`` propagate to the HTTP
layer unchanged. ``BackupWarning`` is never raised to callers; the backup
manager logs it and carries on with the save.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union


class ControlPlaneError(Exception):
    """Base exception for configuration store failures.

    Attributes:
        message: Human readable description
        path: File the operation was acting on, if any
        cause: Underlying exception, if any
    """

    error_code: str = "CONTROL_PLANE"

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "path": str(self.path) if self.path is not None else None,
            "cause": repr(self.cause) if self.cause is not None else None,
        }


class NotFoundError(ControlPlaneError):
    """Raised when the configuration file does not exist."""
    error_code = "CONFIG_NOT_FOUND"


class ParseError(ControlPlaneError):
    """Raised when the configuration file is not a valid JSON object."""
    error_code = "CONFIG_PARSE"


class WriteError(ControlPlaneError):
    """Raised when the configuration could not be serialized or persisted."""
    error_code = "CONFIG_WRITE"


class BackupWarning(UserWarning):
    """Non-fatal failure to snapshot the configuration before a write."""

    def __init__(self, path: Union[str, Path], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not back up {self.path}: {cause}")

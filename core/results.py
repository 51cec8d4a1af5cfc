"""
Result types for FileKit operations.

Internal operations report their outcome as an OpResult instead of raising,
so the public functions can decide how much of the failure to expose.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Why an operation did not succeed."""
    NOT_FOUND = "not_found"            # Source path or resource missing/unopenable
    ALREADY_EXISTS = "already_exists"  # Target present where it must not be
    UNSUPPORTED = "unsupported"        # Host lacks the required capability
    IO_FAILURE = "io_failure"          # Anything else raised by the platform


@dataclass
class OpResult:
    """Outcome of a single file operation."""
    success: bool
    value: Optional[Any] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: Any = None, message: Optional[str] = None) -> "OpResult":
        return cls(success=True, value=value, message=message)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        error: Optional[BaseException] = None
    ) -> "OpResult":
        return cls(success=False, error_kind=kind, message=message, error=error)

    @classmethod
    def from_exception(cls, message: str, error: BaseException) -> "OpResult":
        """Classify a platform exception into an ErrorKind."""
        if isinstance(error, FileNotFoundError):
            kind = ErrorKind.NOT_FOUND
        elif isinstance(error, FileExistsError):
            kind = ErrorKind.ALREADY_EXISTS
        else:
            kind = ErrorKind.IO_FAILURE
        return cls.fail(kind, message, error)

    def __bool__(self) -> bool:
        return self.success

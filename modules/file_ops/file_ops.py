"""
Public file operations for FileKit.

Every function performs one operation and never raises. Reads return None
on failure, mutating operations return False, and copy_file returns nothing.
Failures are reported on standard error (and to the audit log if one is
configured) so callers only need to check the return value.
"""

from typing import List, Optional

from core.config import DEFAULT_CONFIG, FileOpsConfig
from core.logger import ActionType, DiagnosticReporter
from core.results import ErrorKind, OpResult

from . import operations
from .desktop import DesktopOpener, SystemDesktopOpener
from .operations import PathLike, Source


def _setup(config: Optional[FileOpsConfig], reporter: Optional[DiagnosticReporter]):
    config = config or DEFAULT_CONFIG
    return config, reporter or DiagnosticReporter.from_config(config)


def _report(
    result: OpResult,
    action_type: ActionType,
    reporter: DiagnosticReporter,
    **metadata
) -> OpResult:
    if result.success:
        reporter.success(action_type, result.message or action_type.value, metadata=metadata)
    else:
        metadata["error_kind"] = result.error_kind.value if result.error_kind else None
        reporter.failure(action_type, result.message or action_type.value, result.error, metadata=metadata)
    return result


def read_bytes(
    path: PathLike,
    source: Source = Source.EXTERNAL,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> Optional[bytes]:
    """
    Read all data from a file or bundled resource.

    Args:
        path: Path to the file, or resource path for Source.BUNDLED
        source: Where to look for the data

    Returns:
        The data, or None in case of failure
    """
    config, reporter = _setup(config, reporter)
    result = _report(
        operations.read_bytes(path, source, config),
        ActionType.READ, reporter, path=str(path), source=getattr(source, "value", source)
    )
    return result.value if result.success else None


def read_lines(
    path: PathLike,
    source: Source = Source.EXTERNAL,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> Optional[List[str]]:
    """
    Read all lines from a file or bundled resource.

    Lines are decoded with the configured encoding (platform default unless
    set) and returned without their terminators.

    Returns:
        The lines, or None in case of failure
    """
    config, reporter = _setup(config, reporter)
    result = _report(
        operations.read_lines(path, source, config),
        ActionType.READ, reporter, path=str(path), source=getattr(source, "value", source)
    )
    return result.value if result.success else None


def read_internal_data(path: PathLike, **kwargs) -> Optional[bytes]:
    """Read all data from a bundled resource."""
    return read_bytes(path, Source.BUNDLED, **kwargs)


def read_external_data(path: PathLike, **kwargs) -> Optional[bytes]:
    """Read all data from a file on disk."""
    return read_bytes(path, Source.EXTERNAL, **kwargs)


def read_internal_lines(path: PathLike, **kwargs) -> Optional[List[str]]:
    """Read all lines from a bundled resource."""
    return read_lines(path, Source.BUNDLED, **kwargs)


def read_external_lines(path: PathLike, **kwargs) -> Optional[List[str]]:
    """Read all lines from a file on disk."""
    return read_lines(path, Source.EXTERNAL, **kwargs)


def write_bytes(
    path: PathLike,
    data: bytes,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> bool:
    """
    Write data to a file, creating or truncating it.

    Returns:
        True on success; False otherwise
    """
    config, reporter = _setup(config, reporter)
    result = _report(
        operations.write_bytes(path, data, config),
        ActionType.WRITE, reporter, path=str(path)
    )
    return result.success


def write_lines(
    path: PathLike,
    *lines: str,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> bool:
    """
    Write lines of text to a file, creating or truncating it.

    Every line, including the last, is followed by the configured line
    terminator ("\\r\\n" by default) whatever the host platform.

    Returns:
        True on success; False otherwise
    """
    config, reporter = _setup(config, reporter)
    result = _report(
        operations.write_lines(path, lines, config),
        ActionType.WRITE, reporter, path=str(path)
    )
    return result.success


def create_file(
    path: PathLike,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> bool:
    """
    Create an empty file, along with any missing parent directories.

    If the file already exists nothing happens and the call succeeds.

    Returns:
        True on success; False otherwise
    """
    config, reporter = _setup(config, reporter)
    result = _report(operations.create_file(path), ActionType.CREATE, reporter, path=str(path))
    return result.success


def delete_file(
    path: PathLike,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> bool:
    """
    Delete a file.

    Returns:
        True on success; False if the file is absent or could not be removed
    """
    config, reporter = _setup(config, reporter)
    result = _report(operations.delete_file(path), ActionType.DELETE, reporter, path=str(path))
    return result.success


def create_directory(
    path: PathLike,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> bool:
    """
    Create a directory and all necessary parent directories.

    Returns:
        True if directories were created; False if it already existed or on failure
    """
    config, reporter = _setup(config, reporter)
    result = operations.create_directory(path)
    # An existing directory is an expected outcome, not worth a diagnostic
    if result.error_kind != ErrorKind.ALREADY_EXISTS:
        _report(result, ActionType.CREATE, reporter, path=str(path))
    return result.success


def execute_file(
    path: PathLike,
    *,
    opener: Optional[DesktopOpener] = None,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> bool:
    """
    Open a file with the operating system's default application.

    Returns immediately once the file has been handed off.

    Returns:
        True on success; False otherwise
    """
    config, reporter = _setup(config, reporter)
    result = _report(
        operations.execute_file(path, opener or SystemDesktopOpener()),
        ActionType.EXECUTE, reporter, path=str(path)
    )
    return result.success


def copy_file(
    source: PathLike,
    destination: PathLike,
    *,
    config: Optional[FileOpsConfig] = None,
    reporter: Optional[DiagnosticReporter] = None
) -> None:
    """
    Copy a file into a directory, keeping its file name.

    An existing file in the destination is never overwritten; that case and
    any other I/O error are reported, not raised.

    Args:
        source: The file to copy
        destination: The directory to copy into
    """
    config, reporter = _setup(config, reporter)
    _report(
        operations.copy_file(source, destination),
        ActionType.COPY, reporter, source=str(source), destination=str(destination)
    )

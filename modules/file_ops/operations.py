"""
File operations returning explicit results.

Each function performs one filesystem step and describes the outcome with an
OpResult. Nothing here raises for platform errors; the public functions in
``file_ops`` decide how to surface a failure.
"""

import io
import os
import shutil
from enum import Enum
from pathlib import Path
from typing import BinaryIO, List, Union

from core.config import FileOpsConfig
from core.results import ErrorKind, OpResult

from .desktop import DesktopOpener
from .resources import ResourceStore


PathLike = Union[str, os.PathLike]

# Written after every line on every platform
LINE_TERMINATOR = "\r\n"


class Source(Enum):
    """Where a read looks for its data."""
    EXTERNAL = "external"  # Host filesystem
    BUNDLED = "bundled"    # Resources packaged with the application


def read_stream(stream: BinaryIO, buffer_size: int) -> bytes:
    """Read a binary stream in chunks until end-of-stream."""
    out = io.BytesIO()
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        out.write(chunk)
    return out.getvalue()


def read_text_lines(stream: BinaryIO, encoding=None) -> List[str]:
    """
    Decode a binary stream into lines.

    "\\n", "\\r\\n" and "\\r" each end a line; terminators are stripped.
    Undecodable bytes become U+FFFD rather than failing the read.
    """
    reader = io.TextIOWrapper(stream, encoding=encoding, errors="replace", newline=None)
    try:
        return [line[:-1] if line.endswith("\n") else line for line in reader]
    finally:
        # The caller owns the underlying stream
        reader.detach()


def open_source(path: PathLike, source: Source, config: FileOpsConfig) -> OpResult:
    """Open ``path`` for binary reading from the given source."""
    try:
        source = Source(source)
    except ValueError as e:
        return OpResult.fail(ErrorKind.IO_FAILURE, f"Unknown source {source!r}", e)

    if source == Source.BUNDLED:
        try:
            stream = ResourceStore(config.resource_package).open(str(path))
        except Exception as e:
            return OpResult.fail(ErrorKind.IO_FAILURE, f"Error opening resource {path}", e)
        if stream is None:
            return OpResult.fail(ErrorKind.NOT_FOUND, f"Resource not found: {path}")
        return OpResult.ok(stream)

    try:
        return OpResult.ok(open(path, "rb"))
    except Exception as e:
        return OpResult.from_exception(f"Error opening file {path}", e)


def read_bytes(path: PathLike, source: Source, config: FileOpsConfig) -> OpResult:
    opened = open_source(path, source, config)
    if not opened:
        return opened

    try:
        with opened.value as stream:
            data = read_stream(stream, config.buffer_size)
    except Exception as e:
        return OpResult.from_exception(f"Error reading {path}", e)

    return OpResult.ok(data, f"Read {len(data)} bytes from {path}")


def read_lines(path: PathLike, source: Source, config: FileOpsConfig) -> OpResult:
    opened = open_source(path, source, config)
    if not opened:
        return opened

    try:
        with opened.value as stream:
            lines = read_text_lines(stream, config.encoding)
    except Exception as e:
        return OpResult.from_exception(f"Error reading lines from {path}", e)

    return OpResult.ok(lines, f"Read {len(lines)} lines from {path}")


def write_bytes(path: PathLike, data: bytes, config: FileOpsConfig) -> OpResult:
    try:
        with open(path, "wb") as f:
            f.write(data)
            f.flush()
    except Exception as e:
        return OpResult.from_exception(f"Error writing {path}", e)

    return OpResult.ok(True, f"Wrote {len(data)} bytes to {path}")


def write_lines(path: PathLike, lines, config: FileOpsConfig) -> OpResult:
    try:
        # newline="" stops the platform translating the terminator
        with open(path, "w", encoding=config.encoding, newline="") as f:
            for line in lines:
                f.write(line + LINE_TERMINATOR)
            f.flush()
    except Exception as e:
        return OpResult.from_exception(f"Error writing lines to {path}", e)

    return OpResult.ok(True, f"Wrote {len(lines)} lines to {path}")


def create_directory(path: PathLike) -> OpResult:
    """
    Create a directory and all missing parents.

    Succeeds only if something was created; an existing path is a failure
    with ErrorKind.ALREADY_EXISTS.
    """
    try:
        target = Path(path)
        if target.exists():
            return OpResult.fail(ErrorKind.ALREADY_EXISTS, f"Already exists: {path}")
        target.mkdir(parents=True)
    except Exception as e:
        return OpResult.from_exception(f"Error creating directory {path}", e)

    return OpResult.ok(True, f"Created directory {path}")


def create_file(path: PathLike) -> OpResult:
    """Create an empty file, creating parent directories first."""
    try:
        target = Path(path)
    except TypeError as e:
        return OpResult.fail(ErrorKind.IO_FAILURE, f"Invalid path: {path!r}", e)

    # Result ignored: the parent usually exists already
    create_directory(target.parent)

    try:
        with open(target, "x"):
            pass
    except FileExistsError as e:
        if target.is_file():
            return OpResult.ok(False, f"File already exists: {path}")
        return OpResult.fail(ErrorKind.ALREADY_EXISTS, f"Not a regular file: {path}", e)
    except Exception as e:
        return OpResult.from_exception(f"Error creating file {path}", e)

    return OpResult.ok(True, f"Created file {path}")


def delete_file(path: PathLike) -> OpResult:
    """Delete a file, or an empty directory."""
    try:
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            target.rmdir()
        else:
            target.unlink()
    except Exception as e:
        return OpResult.from_exception(f"Error deleting {path}", e)

    return OpResult.ok(True, f"Deleted {path}")


def execute_file(path: PathLike, opener: DesktopOpener) -> OpResult:
    """Hand a file to the desktop's default handler without waiting."""
    try:
        if not opener.is_supported():
            return OpResult.fail(ErrorKind.UNSUPPORTED, "Desktop integration is not supported")
        if not Path(path).exists():
            return OpResult.fail(ErrorKind.NOT_FOUND, f"File not found: {path}")
        if not opener.can_open():
            return OpResult.fail(ErrorKind.UNSUPPORTED, "Desktop open action is not supported")
        opener.open(path)
    except Exception as e:
        return OpResult.from_exception(f"Error opening {path}", e)

    return OpResult.ok(True, f"Opened {path}")


def copy_file(source: PathLike, destination: PathLike) -> OpResult:
    """
    Copy ``source`` into the ``destination`` directory under its own name.

    An existing target is never overwritten: the target is created
    exclusively, so the existence check and the create are one step.
    """
    try:
        source_path = Path(source)
        target = Path(destination) / source_path.name

        with open(source_path, "rb") as src:
            try:
                dst = open(target, "xb")
            except FileExistsError:
                return OpResult.fail(ErrorKind.ALREADY_EXISTS, f"File {target} already exists.")
            try:
                with dst:
                    shutil.copyfileobj(src, dst)
            except Exception:
                # A partial target would block every later copy as "already exists"
                target.unlink(missing_ok=True)
                raise
    except Exception as e:
        return OpResult.from_exception("I/O Error when copying file", e)

    return OpResult.ok(target, f"Copied {source} to {target}")

"""
Desktop integration: hand a file to the operating system's default handler.
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Union


class DesktopOpener:
    """Capability interface for opening files with the default application."""

    def is_supported(self) -> bool:
        """Whether any desktop integration is available on this host."""
        return False

    def can_open(self) -> bool:
        """Whether the "open" action specifically is available."""
        return False

    def open(self, path: Union[str, Path]) -> None:
        """Hand the file off and return without waiting."""
        raise NotImplementedError("Desktop open is not supported")


class SystemDesktopOpener(DesktopOpener):
    """
    DesktopOpener backed by the host platform.

    Windows uses os.startfile, macOS the ``open`` command and other systems
    ``xdg-open`` when a graphical session is running.
    """

    def __init__(self, platform: Optional[str] = None):
        self.platform = platform or sys.platform

    def _command(self) -> Optional[List[str]]:
        if self.platform == "darwin":
            tool = shutil.which("open")
            return [tool] if tool else None

        if not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")):
            return None
        tool = shutil.which("xdg-open")
        return [tool] if tool else None

    def is_supported(self) -> bool:
        if self.platform.startswith("win"):
            return hasattr(os, "startfile")
        return self._command() is not None

    def can_open(self) -> bool:
        return self.is_supported()

    def open(self, path: Union[str, Path]) -> None:
        target = str(Path(path).resolve())

        if self.platform.startswith("win"):
            os.startfile(target)
            return

        command = self._command()
        if command is None:
            raise OSError("No desktop open handler available")

        # Detached: the handler outlives this call and is never waited on
        subprocess.Popen(
            command + [target],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

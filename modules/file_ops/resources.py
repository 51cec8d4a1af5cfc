"""
Bundled resource lookup.

Resources are files packaged inside an importable Python package and are
addressed by a slash-separated path relative to that package.
"""

from importlib import resources
from typing import BinaryIO, Optional


class ResourceStore:
    """Read-only lookup of packaged resources by path."""

    def __init__(self, package: str = "filekit_assets"):
        """
        Initialize the store.

        Args:
            package: Dotted name of the package holding the resources
        """
        self.package = package

    def _resolve(self, path: str):
        parts = [p for p in str(path).replace("\\", "/").split("/") if p and p != "."]
        if not parts or ".." in parts:
            return None

        node = resources.files(self.package)
        for part in parts:
            node = node.joinpath(part)
        return node

    def exists(self, path: str) -> bool:
        try:
            node = self._resolve(path)
        except (ModuleNotFoundError, TypeError):
            return False
        return node is not None and node.is_file()

    def open(self, path: str) -> Optional[BinaryIO]:
        """
        Open a resource as a binary stream.

        A leading "/" is accepted and ignored, so "/data/a.txt" and
        "data/a.txt" name the same resource.

        Args:
            path: Resource path relative to the package

        Returns:
            An open binary stream, or None if the resource is absent
        """
        if not self.exists(path):
            return None
        try:
            return self._resolve(path).open("rb")
        except OSError:
            return None

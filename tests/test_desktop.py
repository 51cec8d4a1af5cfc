"""
Tests for desktop integration and the bundled resource store.
"""

import subprocess
import pytest
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from modules.file_ops import DesktopOpener, ResourceStore, SystemDesktopOpener


class TestSystemDesktopOpener:
    """Test SystemDesktopOpener class."""

    def test_base_opener_unsupported(self):
        """The bare interface supports nothing."""
        opener = DesktopOpener()

        assert not opener.is_supported()
        assert not opener.can_open()
        with pytest.raises(NotImplementedError):
            opener.open("x")

    def test_linux_without_display(self, monkeypatch):
        """Without a graphical session there is nothing to open with."""
        monkeypatch.delenv("DISPLAY", raising=False)
        monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)

        opener = SystemDesktopOpener(platform="linux")

        assert not opener.is_supported()

    def test_linux_without_xdg_open(self, monkeypatch):
        """A session without xdg-open is unsupported."""
        monkeypatch.setenv("DISPLAY", ":0")

        with patch("modules.file_ops.desktop.shutil.which", return_value=None):
            assert not SystemDesktopOpener(platform="linux").is_supported()

    def test_linux_open_is_detached(self, monkeypatch, tmp_path):
        """xdg-open is launched without waiting for it."""
        monkeypatch.setenv("DISPLAY", ":0")
        target = tmp_path / "doc.txt"
        target.write_bytes(b"")

        with patch("modules.file_ops.desktop.shutil.which", return_value="/usr/bin/xdg-open"), \
                patch("modules.file_ops.desktop.subprocess.Popen") as popen:
            opener = SystemDesktopOpener(platform="linux")

            assert opener.is_supported()
            assert opener.can_open()
            opener.open(target)

        args, kwargs = popen.call_args
        assert args[0] == ["/usr/bin/xdg-open", str(target.resolve())]
        assert kwargs["start_new_session"]
        assert kwargs["stdout"] == subprocess.DEVNULL
        popen.return_value.wait.assert_not_called()

    def test_macos_uses_open(self, tmp_path):
        """macOS hands off to the open command."""
        with patch("modules.file_ops.desktop.shutil.which", return_value="/usr/bin/open"), \
                patch("modules.file_ops.desktop.subprocess.Popen") as popen:
            SystemDesktopOpener(platform="darwin").open(tmp_path)

        assert popen.call_args[0][0][0] == "/usr/bin/open"

    def test_open_without_handler_raises(self, monkeypatch):
        """Opening with no handler is an error for the caller to catch."""
        monkeypatch.delenv("DISPLAY", raising=False)
        monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)

        with pytest.raises(OSError):
            SystemDesktopOpener(platform="linux").open("x")


class TestResourceStore:
    """Test ResourceStore class."""

    def test_open_existing(self):
        """Existing resources open as binary streams."""
        stream = ResourceStore("filekit_assets").open("sample.txt")

        assert stream is not None
        with stream:
            assert stream.read().startswith(b"first")

    def test_default_package(self):
        """The default store reads from the project's own resource package."""
        store = ResourceStore()

        assert store.package == "filekit_assets"
        assert store.exists("sample.txt")

    def test_leading_slash(self):
        """Classpath-style absolute paths are accepted."""
        assert ResourceStore("filekit_assets").exists("/sample.txt")

    def test_missing_resource(self):
        """Missing resources are absent, not errors."""
        assert ResourceStore("filekit_assets").open("nope.txt") is None

    def test_directory_is_not_a_resource(self):
        """Only files count as resources."""
        assert ResourceStore("filekit_assets").open("/") is None

    def test_parent_traversal_rejected(self):
        """Paths cannot escape the package."""
        assert ResourceStore("filekit_assets").open("../pyproject.toml") is None

    def test_missing_package(self):
        """An unknown package has no resources."""
        assert ResourceStore("no_such_package_here").open("sample.txt") is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

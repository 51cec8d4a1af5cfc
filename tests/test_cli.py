"""
Tests for the filekit inspection console.
"""

import json
import pytest
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from click.testing import CliRunner

from core.config import FileOpsConfig
from core.logger import AuditLogger, ActionType, ActionStatus
from filekit import filekit


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_path(tmp_path):
    """Config file pointing at a temporary audit log."""
    path = tmp_path / "config.yaml"
    FileOpsConfig(audit_log=str(tmp_path / "audit.jsonl")).save(path)
    return path


class TestStatus:
    """Test the status command."""

    def test_shows_config(self, runner, config_path):
        """The effective settings are listed."""
        result = runner.invoke(filekit, ["--config", str(config_path), "status"])

        assert result.exit_code == 0
        assert "buffer_size" in result.output
        assert "'filekit_assets'" in result.output

    def test_invalid_config(self, runner, tmp_path):
        """An invalid config is a usage error, not a traceback."""
        path = tmp_path / "config.yaml"
        path.write_text("fileops:\n  buffer_size: -1\n", encoding="utf-8")

        result = runner.invoke(filekit, ["--config", str(path), "status"])

        assert result.exit_code != 0
        assert "Invalid configuration" in result.output


class TestAudit:
    """Test the audit command."""

    def test_auditing_disabled(self, runner, tmp_path):
        """Without an audit log there is nothing to show."""
        result = runner.invoke(filekit, ["--config", str(tmp_path / "none.yaml"), "audit"])

        assert result.exit_code == 0
        assert "Auditing is disabled" in result.output

    def test_table(self, runner, config_path, tmp_path):
        """Recent entries are rendered."""
        AuditLogger(tmp_path / "audit.jsonl").log_action(
            action_type=ActionType.COPY,
            description="Copied a",
            status=ActionStatus.FAILED
        )

        result = runner.invoke(filekit, ["--config", str(config_path), "audit", "--failed"])

        assert result.exit_code == 0
        assert "Copied a" in result.output

    def test_export_json(self, runner, config_path, tmp_path):
        """The log can be dumped as JSON."""
        AuditLogger(tmp_path / "audit.jsonl").log_action(
            action_type=ActionType.WRITE,
            description="Wrote b"
        )

        result = runner.invoke(filekit, ["--config", str(config_path), "audit", "--export", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["action_description"] == "Wrote b"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Diagnostics and audit logging for FileKit.

Failures are reported as human-readable lines on standard error. When an
audit log is configured, every operation outcome is also appended to a JSONL
file for later review.
"""

import csv
import io
import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any, Union
from enum import Enum

from rich.console import Console
from rich.markup import escape


class ActionType(Enum):
    """Types of file operations that can be logged."""
    READ = "read"
    WRITE = "write"
    CREATE = "create"
    DELETE = "delete"
    EXECUTE = "execute"
    COPY = "copy"


class ActionStatus(Enum):
    """Outcome of an operation."""
    EXECUTED = "executed"
    FAILED = "failed"


@dataclass
class AuditEntry:
    """Represents a single audit log entry."""
    timestamp: str
    action_type: str
    action_description: str
    status: str
    result: Optional[str]
    metadata: Dict[str, Any]

    @classmethod
    def create(
        cls,
        action_type: ActionType,
        action_description: str,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "AuditEntry":
        """Factory method to create an audit entry with current timestamp."""
        return cls(
            timestamp=datetime.now().isoformat(),
            action_type=action_type.value,
            action_description=action_description,
            status=status.value,
            result=result,
            metadata=metadata or {}
        )

    def to_json(self) -> str:
        """Convert entry to JSON string."""
        return json.dumps(asdict(self), ensure_ascii=False, default=str)

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEntry":
        """Create entry from JSON string."""
        data = json.loads(json_str)
        return cls(**data)


class AuditLogger:
    """
    Append-only audit logger.

    All operation outcomes are logged to a JSONL file.
    """

    def __init__(self, log_path: Union[str, Path] = "data/audit_log.jsonl"):
        """
        Initialize the audit logger.

        Args:
            log_path: Path to the JSONL log file
        """
        self.log_path = Path(log_path)
        self._ensure_log_directory()

    def _ensure_log_directory(self) -> None:
        """Create the log directory and file if they don't exist."""
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.log_path.exists():
            self.log_path.touch()

    def log(self, entry: AuditEntry) -> None:
        """
        Append an audit entry to the log.

        Args:
            entry: The AuditEntry to log
        """
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")

    def log_action(
        self,
        action_type: ActionType,
        description: str,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuditEntry:
        """
        Convenience method to create and log an entry in one call.

        Returns the created AuditEntry.
        """
        entry = AuditEntry.create(
            action_type=action_type,
            action_description=description,
            status=status,
            result=result,
            metadata=metadata
        )
        self.log(entry)
        return entry

    def _iter_entries(self):
        if not self.log_path.exists():
            return

        with open(self.log_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield AuditEntry.from_json(line)
                except (json.JSONDecodeError, TypeError):
                    continue

    def get_recent(self, limit: int = 100) -> List[AuditEntry]:
        """
        Get the most recent audit entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of AuditEntry objects, most recent first
        """
        entries = list(self._iter_entries())
        return list(reversed(entries[-limit:])) if limit > 0 else []

    def get_by_date(self, date: datetime) -> List[AuditEntry]:
        """Get all audit entries for a specific date."""
        date_str = date.strftime("%Y-%m-%d")
        return [e for e in self._iter_entries() if e.timestamp.startswith(date_str)]

    def get_by_action_type(self, action_type: ActionType, limit: int = 100) -> List[AuditEntry]:
        """Get audit entries filtered by action type."""
        entries = []
        for entry in self._iter_entries():
            if len(entries) >= limit:
                break
            if entry.action_type == action_type.value:
                entries.append(entry)
        return entries

    def get_failed_actions(self, limit: int = 50) -> List[AuditEntry]:
        """
        Get operations that failed.

        Useful for reviewing soft failures that callers may have ignored.
        """
        entries = []
        for entry in self._iter_entries():
            if len(entries) >= limit:
                break
            if entry.status == ActionStatus.FAILED.value:
                entries.append(entry)
        return entries

    def export(self, format: str = "json") -> str:
        """
        Export the entire audit log.

        Args:
            format: Export format ("json" or "csv")

        Returns:
            String containing the exported data
        """
        entries = self.get_recent(limit=10000)

        if format == "json":
            return json.dumps([asdict(e) for e in entries], indent=2, default=str)
        elif format == "csv":
            out = io.StringIO()
            writer = csv.writer(out, lineterminator="\n")
            writer.writerow(["timestamp", "action_type", "action_description", "status", "result"])
            for e in entries:
                writer.writerow([e.timestamp, e.action_type, e.action_description, e.status, e.result or ""])
            return out.getvalue()
        else:
            raise ValueError(f"Unsupported export format: {format}")

    def clear(self, confirm: bool = False) -> bool:
        """
        Clear the audit log.

        The current log is renamed to a timestamped backup first.

        Args:
            confirm: Must be True to actually clear the log

        Returns:
            True if cleared, False otherwise
        """
        if not confirm:
            return False

        if self.log_path.exists():
            backup_path = self.log_path.with_suffix(f".backup.{datetime.now().strftime('%Y%m%d_%H%M%S')}.jsonl")
            self.log_path.rename(backup_path)
            self.log_path.touch()
            return True

        return False


class DiagnosticReporter:
    """
    Reports operation outcomes.

    Failures go to standard error; successes and failures both go to the
    audit log when one is attached.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        audit_logger: Optional[AuditLogger] = None,
        enabled: bool = True
    ):
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)
        self.audit_logger = audit_logger
        self.enabled = enabled

    @classmethod
    def from_config(cls, config) -> "DiagnosticReporter":
        """Build a reporter from a FileOpsConfig."""
        reporter = cls(enabled=config.diagnostics)
        if config.audit_log:
            try:
                reporter.audit_logger = AuditLogger(config.audit_log)
            except OSError as e:
                if reporter.enabled:
                    reporter.console.print(f"[red]{escape(f'Audit log unavailable: {e}')}[/red]")
        return reporter

    def failure(
        self,
        action_type: ActionType,
        message: str,
        error: Optional[BaseException] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Report a failed operation."""
        detail = f"{message}: {error}" if error is not None else message

        if self.enabled:
            self.console.print(f"[red]{escape(detail)}[/red]")

        self._audit(
            action_type=action_type,
            description=message,
            status=ActionStatus.FAILED,
            result=f"Error: {error}" if error is not None else None,
            metadata=metadata
        )

    def success(
        self,
        action_type: ActionType,
        message: str,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a successful operation in the audit log, if any."""
        self._audit(
            action_type=action_type,
            description=message,
            status=ActionStatus.EXECUTED,
            result=result,
            metadata=metadata
        )

    def _audit(self, **kwargs: Any) -> None:
        if self.audit_logger is None:
            return

        # An unwritable audit log must not turn a soft failure into a raise
        try:
            self.audit_logger.log_action(**kwargs)
        except OSError as e:
            if self.enabled:
                self.console.print(f"[red]{escape(f'Audit log unavailable: {e}')}[/red]")

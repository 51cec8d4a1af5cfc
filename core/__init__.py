# FileKit - Core Module
"""
Core infrastructure for FileKit.
Configuration, result types and diagnostics shared by the file operations.
"""

from .config import FileOpsConfig, DEFAULT_CONFIG
from .logger import AuditLogger, AuditEntry, DiagnosticReporter
from .results import OpResult, ErrorKind

__all__ = [
    "FileOpsConfig",
    "DEFAULT_CONFIG",
    "AuditLogger",
    "AuditEntry",
    "DiagnosticReporter",
    "OpResult",
    "ErrorKind",
]

__version__ = "0.1.0"

"""
Configuration for FileKit.

Settings are read from a YAML file under a top-level ``fileops`` key.
A missing or unreadable file yields the defaults.
"""

from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_SECTION = "fileops"


@dataclass(frozen=True)
class FileOpsConfig:
    """
    Settings shared by all file operations.

    The config is immutable; use ``with_overrides`` to derive a variant.
    """
    buffer_size: int = 1024
    encoding: Optional[str] = None       # None = platform default
    resource_package: str = "filekit_assets"
    diagnostics: bool = True
    audit_log: Optional[str] = None      # None = auditing disabled

    def __post_init__(self) -> None:
        if not isinstance(self.buffer_size, int) or self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be a positive integer, got {self.buffer_size!r}")
        if not self.resource_package:
            raise ValueError("resource_package must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileOpsConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def load(cls, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> "FileOpsConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            The loaded config, or the defaults if the file is missing or unreadable

        Raises:
            ValueError: If the file holds an invalid setting
        """
        path = Path(config_path)
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return cls()

        if not isinstance(raw, dict):
            return cls()

        section = raw.get(CONFIG_SECTION, raw)
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ValueError(f"'{CONFIG_SECTION}' section must be a mapping")
        return cls.from_dict(section)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides: Any) -> "FileOpsConfig":
        return replace(self, **overrides)

    def save(self, config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> None:
        """Write this config to file, keeping other top-level sections."""
        path = Path(config_path)
        config: Dict[str, Any] = {CONFIG_SECTION: self.to_dict()}

        # Merge with existing config
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    existing = yaml.safe_load(f) or {}
                if isinstance(existing, dict):
                    existing[CONFIG_SECTION] = config[CONFIG_SECTION]
                    config = existing
            except (OSError, yaml.YAMLError):
                pass

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config, f, default_flow_style=False)


DEFAULT_CONFIG = FileOpsConfig()

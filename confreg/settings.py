"""
Settings of the confreg library itself.

These are the knobs of the registry machinery (logging, document layout,
default document location), not the application variables it stores.
"""

import os
from dataclasses import dataclass
from typing import Dict, Any, Optional, Mapping


_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass
class RegistrySettings:
    """
    Library-level configuration.

    Values can be provided explicitly, from a dictionary or from
    `CONFREG_*` environment variables.
    """

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Documents
    document_indent: int = 4
    config_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'log_level': self.log_level,
            'json_logs': self.json_logs,
            'document_indent': self.document_indent,
            'config_path': self.config_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RegistrySettings':
        """Create settings from dictionary."""
        settings = cls()

        settings.log_level = str(data.get('log_level', settings.log_level)).upper()
        json_logs = data.get('json_logs', settings.json_logs)
        if isinstance(json_logs, str):
            json_logs = json_logs.strip().lower() in _TRUE_STRINGS
        settings.json_logs = bool(json_logs)
        settings.document_indent = int(data.get('document_indent', settings.document_indent))
        settings.config_path = data.get('config_path', settings.config_path)

        return settings

    @classmethod
    def from_env(cls, prefix: str = "CONFREG_", environ: Optional[Mapping[str, str]] = None) -> 'RegistrySettings':
        """
        Create settings from environment variables.

        Args:
            prefix: Prefix of the environment variable names
            environ: Mapping to read from, defaults to os.environ

        Raises:
            ValueError: If CONFREG_DOCUMENT_INDENT is not an integer
        """
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        if f"{prefix}LOG_LEVEL" in env:
            data['log_level'] = env[f"{prefix}LOG_LEVEL"]
        if f"{prefix}JSON_LOGS" in env:
            data['json_logs'] = env[f"{prefix}JSON_LOGS"].strip().lower() in _TRUE_STRINGS
        if f"{prefix}DOCUMENT_INDENT" in env:
            data['document_indent'] = int(env[f"{prefix}DOCUMENT_INDENT"])
        if env.get(f"{prefix}CONFIG_PATH"):
            data['config_path'] = env[f"{prefix}CONFIG_PATH"]

        return cls.from_dict(data)

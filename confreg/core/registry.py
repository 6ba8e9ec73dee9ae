"""
Configuration registry holding every variable of the process.

This module provides the thread-safe collection of configuration variables
with typed lookup, textual updates and document load/save/export.
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .document import DocumentError, get_nested_value, read_document, set_nested_value, write_document
from .result import Result
from .variable import VariableBase
from confreg.logger import get_confreg_logger
from confreg.settings import RegistrySettings

PathLike = Union[str, Path]

NO_CONFIG_PATH = "No config path set. Use set_config_path() first."


@dataclass
class VariableInfo:
    """Metadata snapshot of a registered variable."""
    name: str
    type: str
    value: str
    default_value: str
    read_only: bool = False
    description: Optional[str] = None


class ConfigRegistry:
    """
    Central registry of configuration variables.

    Variables are registered once under a unique name and then read and
    written through the registry. A single lock covers the variable
    collection and the config path, every public operation holds it for its
    whole duration. Names are listed in registration order.
    """

    _instance: Optional['ConfigRegistry'] = None
    _instance_lock = threading.Lock()

    def __init__(self, config_path: Optional[PathLike] = None, settings: Optional[RegistrySettings] = None):
        self.settings = settings or RegistrySettings()
        self.logger = get_confreg_logger().bind(component="ConfigRegistry")
        self._lock = threading.RLock()

        self._variables: Dict[str, VariableBase] = {}
        if config_path is None and self.settings.config_path:
            config_path = self.settings.config_path
        self._config_path: Optional[str] = str(config_path) if config_path is not None else None

        self.logger.debug("ConfigRegistry initialized", config_path=self._config_path)

    @classmethod
    def instance(cls) -> 'ConfigRegistry':
        """Return the process-wide registry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(settings=RegistrySettings.from_env())
        return cls._instance

    # Config path

    def set_config_path(self, path: Optional[PathLike]):
        with self._lock:
            self._config_path = str(path) if path is not None else None

    def get_config_path(self) -> Optional[str]:
        with self._lock:
            return self._config_path

    # Variables

    def register(self, variable: VariableBase) -> bool:
        """
        Register a variable under its name.

        Returns:
            False, without changing anything, if the name is already taken
        """
        with self._lock:
            if variable.name in self._variables:
                self.logger.warning("Variable already registered", variable=variable.name)
                return False

            self._variables[variable.name] = variable
            self.logger.debug("Variable registered", variable=variable.name, type=variable.type_name)
            return True

    def get(self, name: str, value_type: type) -> Optional[Any]:
        """
        Return the current value of `name` if it is declared as `value_type`.

        A type mismatch is reported like an unknown name, as None.
        """
        with self._lock:
            variable = self._variables.get(name)
            if variable is None or variable.value_type is not value_type:
                return None
            return variable.value_as_document()

    def set(self, name: str, value: str) -> Result:
        """Parse `value` with the variable's validator and store it."""
        with self._lock:
            variable = self._variables.get(name)
            if variable is None:
                return Result.failure(f"Variable '{name}' not found")

            result = variable.try_set(value)
            if not result:
                self.logger.debug("Variable rejected value", variable=name, error=result.error)
            return result

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._variables

    def get_as_string(self, name: str) -> Optional[str]:
        with self._lock:
            variable = self._variables.get(name)
            if variable is None:
                return None
            return variable.value_as_string()

    def reset(self, name: str) -> bool:
        """Restore the default value of `name`, read-only variables included."""
        with self._lock:
            variable = self._variables.get(name)
            if variable is None:
                return False
            variable.reset()
            return True

    def reset_all(self):
        with self._lock:
            for variable in self._variables.values():
                variable.reset()
            self.logger.debug("All variables reset", count=len(self._variables))

    def list_all(self) -> List[str]:
        """Names of all variables in registration order."""
        with self._lock:
            return list(self._variables.keys())

    def get_info(self, name: str) -> Optional[VariableInfo]:
        with self._lock:
            variable = self._variables.get(name)
            if variable is None:
                return None

            return VariableInfo(
                name=variable.name,
                type=variable.type_name,
                value=variable.value_as_string(),
                default_value=variable.default_value_as_string(),
                read_only=variable.read_only,
                description=variable.description,
            )

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __len__(self):
        with self._lock:
            return len(self._variables)

    # Documents

    def save_to_file(self, path: PathLike) -> Result:
        """Write every variable's value into a nested document at `path`."""
        with self._lock:
            root: Dict[str, Any] = {}
            for name, variable in self._variables.items():
                set_nested_value(root, name, variable.value_as_document())

            return self._write(path, root, "Config saved")

    def load_from_file(self, path: PathLike) -> Result:
        """
        Assign values found in the document at `path`.

        Variables missing from the document keep their value. Every variable
        whose value is rejected is reported in one aggregated error, the
        accepted ones stay applied.
        """
        with self._lock:
            if not Path(path).exists():
                return Result.failure("File doesn't exist")

            try:
                root = read_document(path)
            except DocumentError as e:
                self.logger.error("Failed to load config", path=str(path), error=str(e))
                return Result.failure(str(e))

            errors = []
            loaded = 0
            for name, variable in self._variables.items():
                found, value = get_nested_value(root, name)
                if not found:
                    continue

                result = variable.try_set_document(value, force=True)
                if result:
                    loaded += 1
                else:
                    errors.append(f"{name}: {result.error}")

            if errors:
                self.logger.error("Some variables failed to load", path=str(path), errors=errors)
                message = "Some variables failed to load:\n"
                for error in errors:
                    message += f" - {error}\n"
                return Result.failure(message)

            self.logger.info("Config loaded", path=str(path), variables=loaded)
            return Result.success()

    def export_template(self, path: PathLike) -> Result:
        """Write a document describing every variable: value, default, type and flags."""
        with self._lock:
            root: Dict[str, Any] = {}
            for name, variable in self._variables.items():
                info: Dict[str, Any] = {
                    'readonly': variable.read_only,
                    'value': variable.value_as_document(),
                    'default': variable.default_value_as_document(),
                    'type': variable.type_name,
                }
                if variable.description is not None:
                    info['description'] = variable.description

                set_nested_value(root, name, info)

            return self._write(path, root, "Config template exported")

    def save(self) -> Result:
        with self._lock:
            if not self._config_path:
                return Result.failure(NO_CONFIG_PATH)
            return self.save_to_file(self._config_path)

    def load(self) -> Result:
        with self._lock:
            if not self._config_path:
                return Result.failure(NO_CONFIG_PATH)
            return self.load_from_file(self._config_path)

    def export(self) -> Result:
        with self._lock:
            if not self._config_path:
                return Result.failure(NO_CONFIG_PATH)
            return self.export_template(self._config_path)

    def _write(self, path: PathLike, root: Dict[str, Any], event: str) -> Result:
        try:
            write_document(path, root, indent=self.settings.document_indent)
        except DocumentError as e:
            self.logger.error("Failed to write config", path=str(path), error=str(e))
            return Result.failure(str(e))

        self.logger.info(event, path=str(path), variables=len(self._variables))
        return Result.success()

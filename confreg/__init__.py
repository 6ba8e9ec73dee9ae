"""
Typed in-process configuration registry.

Register named, typed variables with defaults and validators, update them
from text, and persist the whole set to JSON or YAML documents with dotted
names nested as objects:

    from confreg import config, config_int, int_ranged

    config_int("server.port", 8080, int_ranged(1, 65535), "Listening port")
    config().set("server.port", "9000")
    config().get("server.port", int)  # 9000
"""

from confreg.core import (
    Result, ValidationError,
    ValidatorPipeline, ValidatorBuilder, validator,
    int_ranged, float_ranged, string_non_empty, boolean,
    VariableBase, ConfigVariable,
    ConfigRegistry, VariableInfo, DocumentError
)
from confreg.declarations import config_string, config_int, config_float, config_boolean
from confreg.settings import RegistrySettings
from confreg.logger import init_logger, setup_logging, get_confreg_logger


def config() -> ConfigRegistry:
    """Get the process-wide configuration registry."""
    return ConfigRegistry.instance()


def get_config_registry(config_path: str = None, settings: RegistrySettings = None) -> ConfigRegistry:
    """Create an independent registry, e.g. for tests or plugins."""
    return ConfigRegistry(config_path, settings)


__all__ = [
    # Core
    'Result',
    'ValidationError',
    'ValidatorPipeline',
    'ValidatorBuilder',
    'validator',
    'int_ranged',
    'float_ranged',
    'string_non_empty',
    'boolean',
    'VariableBase',
    'ConfigVariable',
    'ConfigRegistry',
    'VariableInfo',
    'DocumentError',

    # Declarations
    'config_string',
    'config_int',
    'config_float',
    'config_boolean',

    # Settings and logging
    'RegistrySettings',
    'init_logger',
    'setup_logging',
    'get_confreg_logger',

    # Convenience functions
    'config',
    'get_config_registry'
]

"""
One-call declaration of typed variables.

    config_int("server.port", 8080, int_ranged(1, 65535), "Listening port")

Each helper builds a ConfigVariable and registers it, in the default registry
unless one is passed explicitly. The return value is the registration result.
"""

from typing import Optional

from confreg.core import ConfigRegistry, ConfigVariable, ValidatorBuilder


def _register(value_type: type, name: str, default, validator, description: Optional[str],
              read_only: bool, registry: Optional[ConfigRegistry]) -> bool:
    if registry is None:
        registry = ConfigRegistry.instance()
    return registry.register(ConfigVariable(
        name, default, validator,
        description=description, read_only=read_only, value_type=value_type
    ))


def config_string(name: str, default: str, validator=None, description: Optional[str] = None,
                  read_only: bool = False, registry: Optional[ConfigRegistry] = None) -> bool:
    if validator is None:
        validator = ValidatorBuilder(str).text()
    return _register(str, name, default, validator, description, read_only, registry)


def config_int(name: str, default: int, validator=None, description: Optional[str] = None,
               read_only: bool = False, registry: Optional[ConfigRegistry] = None) -> bool:
    if validator is None:
        validator = ValidatorBuilder(int).trim().not_empty().integer()
    return _register(int, name, default, validator, description, read_only, registry)


def config_float(name: str, default: float, validator=None, description: Optional[str] = None,
                 read_only: bool = False, registry: Optional[ConfigRegistry] = None) -> bool:
    if validator is None:
        validator = ValidatorBuilder(float).trim().not_empty().float()
    return _register(float, name, default, validator, description, read_only, registry)


def config_boolean(name: str, default: bool, validator=None, description: Optional[str] = None,
                   read_only: bool = False, registry: Optional[ConfigRegistry] = None) -> bool:
    if validator is None:
        validator = ValidatorBuilder(bool).trim().not_empty().boolean()
    return _register(bool, name, default, validator, description, read_only, registry)

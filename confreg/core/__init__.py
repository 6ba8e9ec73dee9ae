"""
Core configuration registry components.

This module provides the building blocks of the registry:
- ValidatorPipeline / ValidatorBuilder: raw string to typed value conversion
- ConfigVariable: named, typed, defaulted configuration entry
- ConfigRegistry: thread-safe collection of variables with document I/O
"""

from .result import Result, ValidationError
from .pipeline import ValidatorPipeline
from .builder import ValidatorBuilder, validator, int_ranged, float_ranged, string_non_empty, boolean
from .variable import VariableBase, ConfigVariable
from .document import DocumentError
from .registry import ConfigRegistry, VariableInfo

__all__ = [
    # Results
    'Result',
    'ValidationError',

    # Validators
    'ValidatorPipeline',
    'ValidatorBuilder',
    'validator',
    'int_ranged',
    'float_ranged',
    'string_non_empty',
    'boolean',

    # Variables
    'VariableBase',
    'ConfigVariable',

    # Registry
    'ConfigRegistry',
    'VariableInfo',
    'DocumentError'
]

"""
Configuration variables.

`VariableBase` is the type-erased interface the registry stores; it only
exposes operations that work without knowing the value type. `ConfigVariable`
is the typed implementation holding value, default and validator pipeline.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from .result import Result
from .types import format_value, is_instance_of, type_tag

T = TypeVar('T')

Validator = Callable[[str], Result]


class VariableBase(ABC):
    """Type-erased view of a configuration variable."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> Optional[str]:
        pass

    @property
    @abstractmethod
    def read_only(self) -> bool:
        pass

    @property
    @abstractmethod
    def value_type(self) -> type:
        pass

    @property
    def type_name(self) -> str:
        return type_tag(self.value_type)

    @abstractmethod
    def value_as_string(self) -> str:
        pass

    @abstractmethod
    def default_value_as_string(self) -> str:
        pass

    @abstractmethod
    def value_as_document(self) -> Any:
        pass

    @abstractmethod
    def default_value_as_document(self) -> Any:
        pass

    @abstractmethod
    def try_set(self, value: str) -> Result:
        """Parse and validate `value`, replacing the current value on success."""
        pass

    @abstractmethod
    def try_set_document(self, value: Any, force: bool = False) -> Result:
        """Assign an already typed document value."""
        pass

    @abstractmethod
    def reset(self):
        pass


class ConfigVariable(VariableBase, Generic[T]):
    """
    A named, typed configuration entry with a default value.

    Args:
        name: Unique name, dots nest the variable in saved documents
        default_value: Initial and reset value, its type is the variable's type
        validator: Pipeline (or builder) turning raw strings into values
        description: Human readable text for templates
        read_only: Reject try_set when True
        value_type: Explicit type, inferred from default_value when omitted

    Raises:
        TypeError: If the type is unsupported or the default has another type
    """

    def __init__(self,
                 name: str,
                 default_value: T,
                 validator: Optional[Validator] = None,
                 description: Optional[str] = None,
                 read_only: bool = False,
                 value_type: Optional[type] = None):
        if value_type is None:
            value_type = type(default_value)
        type_tag(value_type)
        if not is_instance_of(default_value, value_type):
            raise TypeError(
                f"Default value of '{name}' must be {value_type.__name__}, "
                f"got {type(default_value).__name__}"
            )

        self._name = name
        self._value_type = value_type
        self._value: T = default_value
        self._default_value: T = default_value
        self._description = description
        self._read_only = read_only
        self._validator = validator

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def value_type(self) -> type:
        return self._value_type

    @property
    def value(self) -> T:
        return self._value

    @property
    def default_value(self) -> T:
        return self._default_value

    def value_as_string(self) -> str:
        return format_value(self._value)

    def default_value_as_string(self) -> str:
        return format_value(self._default_value)

    def value_as_document(self) -> T:
        return self._value

    def default_value_as_document(self) -> T:
        return self._default_value

    def set_value(self, value: T):
        """Assign a typed value directly, bypassing the validator."""
        if not is_instance_of(value, self._value_type):
            raise TypeError(
                f"Value of '{self._name}' must be {self._value_type.__name__}, "
                f"got {type(value).__name__}"
            )
        self._value = value

    def try_set(self, value: str) -> Result:
        if self._read_only:
            return Result.failure(f"Variable '{self._name}' is read-only")
        if self._validator is None:
            return Result.failure("No validator configured")

        result = self._validator(value)
        if not result:
            return Result.failure(result.error)

        return self._assign(result.value)

    def try_set_document(self, value: Any, force: bool = False) -> Result:
        if self._read_only and not force:
            return Result.failure(f"Variable '{self._name}' is read-only")

        coerced = self._coerce_document_value(value)
        if not coerced:
            return coerced

        if self._validator is None:
            return self._assign(coerced.value)

        # Document values are already typed, only the typed steps apply
        pipeline = getattr(self._validator, 'build', None)
        pipeline = pipeline() if pipeline is not None else self._validator
        validate_typed = getattr(pipeline, 'validate_typed', None)
        if validate_typed is None:
            # Plain callables only know how to parse text
            result = self._validator(format_value(coerced.value))
        else:
            result = validate_typed(coerced.value)

        if not result:
            return Result.failure(result.error)
        return self._assign(result.value)

    def reset(self):
        self._value = self._default_value

    def _coerce_document_value(self, value: Any) -> Result:
        if self._value_type is float and is_instance_of(value, int):
            try:
                value = float(value)
            except OverflowError:
                return Result.failure("Float value out of range")

        if self._value_type is float and is_instance_of(value, float) and not math.isfinite(value):
            return Result.failure("Failed to parse float")

        if not is_instance_of(value, self._value_type):
            return Result.failure(f"Expected {self.type_name} value, got {type(value).__name__}")
        return Result.success(value)

    def _assign(self, value: Any) -> Result:
        if not is_instance_of(value, self._value_type):
            return Result.failure(
                f"Validator produced {type(value).__name__}, expected {self.type_name}"
            )
        self._value = value
        return Result.success()

    def __repr__(self):
        return (f"ConfigVariable(name={self._name!r}, type={self.type_name}, "
                f"value={self._value!r}, default={self._default_value!r})")

"""
Result and error types shared by pipelines, variables and the registry.

Fallible operations return a `Result` instead of raising, so a failed parse or
a failed load never propagates past the registry as an exception.
"""

from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


class ValidationError(Exception):
    """Exception raised by custom stages (and `Result.unwrap`) when a value is rejected."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class Result(Generic[T]):
    """Outcome of a fallible operation: either a value or an error message."""

    __slots__ = ('is_ok', 'value', 'error')

    def __init__(self, is_ok: bool, value: Optional[T] = None, error: Optional[str] = None):
        self.is_ok = is_ok
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'Result[T]':
        return cls(True, value=value)

    @classmethod
    def failure(cls, error: str) -> 'Result[T]':
        return cls(False, error=error)

    def unwrap(self) -> T:
        """Return the value or raise ValidationError with the error message."""
        if not self.is_ok:
            raise ValidationError(self.error)
        return self.value

    def __bool__(self):
        return self.is_ok

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.is_ok, self.value, self.error) == (other.is_ok, other.value, other.error)

    def __repr__(self):
        if self.is_ok:
            return f"Result.success({self.value!r})"
        return f"Result.failure({self.error!r})"

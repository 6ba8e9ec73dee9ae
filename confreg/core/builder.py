"""
Fluent construction of validator pipelines.

    port = validator(int).trim().not_empty().integer().range(1, 65535)
    port(" 8080 ")  # Result.success(8080)

The shortcuts at the bottom cover the common cases.
"""

import math
import re
from typing import Generic, Iterable, TypeVar

from .pipeline import ValidatorPipeline, StringValidator, TypedValidator
from .result import Result
from .types import format_value, type_tag

T = TypeVar('T')

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_BOOLEAN_LITERALS = {
    "1": True,
    "true": True,
    "0": False,
    "false": False,
}


class ValidatorBuilder(Generic[T]):
    """
    Accumulates stages into a ValidatorPipeline for values of `value_type`.

    Every method appends a stage and returns the builder, so stages run in
    the order they were chained. The builder is itself callable and can be
    handed to a ConfigVariable directly.
    """

    def __init__(self, value_type: type):
        type_tag(value_type)
        self.value_type = value_type
        self._pipeline: ValidatorPipeline[T] = ValidatorPipeline()

    def build(self) -> ValidatorPipeline[T]:
        return self._pipeline

    def __call__(self, value: str) -> Result:
        return self._pipeline(value)

    # String validators

    def trim(self) -> 'ValidatorBuilder[T]':
        self._pipeline.add_string_validator(lambda value: Result.success(value.strip()))
        return self

    def not_empty(self) -> 'ValidatorBuilder[T]':
        def check(value: str) -> Result:
            if not value:
                return Result.failure("Value should not be empty")
            return Result.success(value)

        self._pipeline.add_string_validator(check)
        return self

    # Parsers

    def integer(self) -> 'ValidatorBuilder[T]':
        value_type = self.value_type

        def parse(value: str) -> Result:
            if not value:
                return Result.failure("String should not be empty")
            if value_type is not int:
                return Result.failure("Unsupported integer type")
            if not _INTEGER_RE.fullmatch(value):
                return Result.failure("Failed to parse integer")
            return Result.success(int(value))

        self._pipeline.set_parser(parse)
        return self

    def float(self) -> 'ValidatorBuilder[T]':
        value_type = self.value_type

        def parse(value: str) -> Result:
            if not value:
                return Result.failure("String should not be empty")
            if value_type is not float:
                return Result.failure("Unsupported float type")
            # float() also accepts digit separators and surrounding whitespace
            if "_" in value or value != value.strip():
                return Result.failure("Failed to parse float")
            try:
                parsed = float(value)
            except ValueError:
                return Result.failure("Failed to parse float")
            if not math.isfinite(parsed):
                return Result.failure("Failed to parse float")
            return Result.success(parsed)

        self._pipeline.set_parser(parse)
        return self

    def boolean(self) -> 'ValidatorBuilder[T]':
        def parse(value: str) -> Result:
            if not value:
                return Result.failure("String should not be empty")
            if value in _BOOLEAN_LITERALS:
                return Result.success(_BOOLEAN_LITERALS[value])
            return Result.failure("Unsupported bool value (1/true/0/false)")

        self._pipeline.set_parser(parse)
        return self

    def text(self) -> 'ValidatorBuilder[T]':
        """Identity parser for string variables."""
        value_type = self.value_type

        def parse(value: str) -> Result:
            if value_type is not str:
                return Result.failure("Unsupported string type")
            return Result.success(value)

        self._pipeline.set_parser(parse)
        return self

    # Typed validators

    def min(self, min_value: T) -> 'ValidatorBuilder[T]':
        def check(value: T) -> Result:
            if value < min_value:
                return Result.failure(f"Value should be >={format_value(min_value)}")
            return Result.success(value)

        self._pipeline.add_typed_validator(check)
        return self

    def max(self, max_value: T) -> 'ValidatorBuilder[T]':
        def check(value: T) -> Result:
            if value > max_value:
                return Result.failure(f"Value should be <={format_value(max_value)}")
            return Result.success(value)

        self._pipeline.add_typed_validator(check)
        return self

    def range(self, min_value: T, max_value: T) -> 'ValidatorBuilder[T]':
        def check(value: T) -> Result:
            if value < min_value or value > max_value:
                return Result.failure(
                    f"Value should be >={format_value(min_value)} and <={format_value(max_value)}"
                )
            return Result.success(value)

        self._pipeline.add_typed_validator(check)
        return self

    def one_of(self, choices: Iterable[T]) -> 'ValidatorBuilder[T]':
        allowed = list(choices)

        def check(value: T) -> Result:
            if value not in allowed:
                return Result.failure(
                    "Value should be one of: " + ", ".join(format_value(choice) for choice in allowed)
                )
            return Result.success(value)

        self._pipeline.add_typed_validator(check)
        return self

    # Custom

    def custom(self, validator: StringValidator) -> 'ValidatorBuilder[T]':
        self._pipeline.add_string_validator(validator)
        return self

    def custom_typed(self, validator: TypedValidator) -> 'ValidatorBuilder[T]':
        self._pipeline.add_typed_validator(validator)
        return self


def validator(value_type: type) -> ValidatorBuilder:
    """Start an empty builder for `value_type`."""
    return ValidatorBuilder(value_type)


# Shortcuts

def int_ranged(min_value: int, max_value: int) -> ValidatorBuilder[int]:
    return ValidatorBuilder(int).trim().not_empty().integer().range(min_value, max_value)


def float_ranged(min_value: float, max_value: float) -> ValidatorBuilder[float]:
    return ValidatorBuilder(float).trim().not_empty().float().range(min_value, max_value)


def string_non_empty() -> ValidatorBuilder[str]:
    return ValidatorBuilder(str).trim().not_empty().text()


def boolean() -> ValidatorBuilder[bool]:
    return ValidatorBuilder(bool).trim().not_empty().boolean()

"""
Validator pipeline: string steps, one parser, typed steps.

A pipeline turns one raw string into a typed value:

1. string steps normalize or reject the text (trim, not-empty, ...)
2. the parser converts the text into the typed value
3. typed steps check or transform the parsed value (min, max, range, ...)

The first failing step aborts the run and its error is returned.
"""

from typing import Any, Callable, Generic, List, Optional, TypeVar

from .result import Result, ValidationError

T = TypeVar('T')

StringValidator = Callable[[str], Any]
Parser = Callable[[str], Any]
TypedValidator = Callable[[Any], Any]


def run_stage(stage: Callable[[Any], Any], value: Any) -> Result:
    """
    Invoke one stage and normalize its outcome to a Result.

    A stage may return a Result, return the (possibly transformed) value
    directly, or raise ValidationError to reject the value.
    """
    try:
        outcome = stage(value)
    except ValidationError as e:
        return Result.failure(e.message)

    if isinstance(outcome, Result):
        return outcome
    return Result.success(outcome)


class ValidatorPipeline(Generic[T]):
    """Ordered chain of string steps, a parser and typed steps."""

    def __init__(self):
        self._string_validators: List[StringValidator] = []
        self._parser: Optional[Parser] = None
        self._typed_validators: List[TypedValidator] = []

    def add_string_validator(self, validator: StringValidator) -> 'ValidatorPipeline[T]':
        self._string_validators.append(validator)
        return self

    def set_parser(self, parser: Parser) -> 'ValidatorPipeline[T]':
        self._parser = parser
        return self

    def add_typed_validator(self, validator: TypedValidator) -> 'ValidatorPipeline[T]':
        self._typed_validators.append(validator)
        return self

    @property
    def has_parser(self) -> bool:
        return self._parser is not None

    def validate_text(self, value: str) -> Result:
        """Run only the string steps."""
        for validator in self._string_validators:
            result = run_stage(validator, value)
            if not result:
                return result
            value = result.value
        return Result.success(value)

    def validate_typed(self, value: T) -> Result:
        """Run only the typed steps on an already parsed value."""
        for validator in self._typed_validators:
            result = run_stage(validator, value)
            if not result:
                return result
            value = result.value
        return Result.success(value)

    def __call__(self, value: str) -> Result:
        text = self.validate_text(value)
        if not text:
            return text

        if self._parser is None:
            return Result.failure("No parser configured")

        parsed = run_stage(self._parser, text.value)
        if not parsed:
            return parsed

        return self.validate_typed(parsed.value)

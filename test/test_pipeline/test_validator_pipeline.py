import pytest

from confreg import Result, ValidationError, ValidatorPipeline

pytestmark = pytest.mark.unit


class TestValidatorPipeline:
    """Ordering and short-circuiting of string steps, parser and typed steps."""

    def setup_method(self):
        self.calls = []

    def record(self, label, outcome):
        def stage(value):
            self.calls.append((label, value))
            return outcome(value)
        return stage

    def test_stages_run_in_order(self):
        pipeline = (ValidatorPipeline()
                    .add_string_validator(self.record("strip", lambda v: Result.success(v.strip())))
                    .add_string_validator(self.record("upper", lambda v: Result.success(v.upper())))
                    .set_parser(self.record("parse", lambda v: Result.success(len(v))))
                    .add_typed_validator(self.record("double", lambda v: Result.success(v * 2)))
                    .add_typed_validator(self.record("inc", lambda v: Result.success(v + 1))))

        result = pipeline("  abc ")

        assert result == Result.success(7)
        assert self.calls == [
            ("strip", "  abc "),
            ("upper", "abc"),
            ("parse", "ABC"),
            ("double", 3),
            ("inc", 6),
        ]

    def test_string_failure_short_circuits(self):
        pipeline = (ValidatorPipeline()
                    .add_string_validator(self.record("reject", lambda v: Result.failure("nope")))
                    .add_string_validator(self.record("never", lambda v: Result.success(v)))
                    .set_parser(self.record("parse", lambda v: Result.success(v))))

        result = pipeline("x")

        assert not result
        assert result.error == "nope"
        assert [label for label, _ in self.calls] == ["reject"]

    def test_missing_parser(self):
        pipeline = ValidatorPipeline().add_string_validator(lambda v: Result.success(v))

        result = pipeline("42")

        assert result.error == "No parser configured"

    def test_string_errors_win_over_missing_parser(self):
        pipeline = ValidatorPipeline().add_string_validator(lambda v: Result.failure("bad text"))

        assert pipeline("42").error == "bad text"

    def test_parser_failure_skips_typed_steps(self):
        pipeline = (ValidatorPipeline()
                    .set_parser(lambda v: Result.failure("unparsable"))
                    .add_typed_validator(self.record("typed", lambda v: Result.success(v))))

        assert pipeline("x").error == "unparsable"
        assert self.calls == []

    def test_typed_failure_short_circuits(self):
        pipeline = (ValidatorPipeline()
                    .set_parser(lambda v: Result.success(int(v)))
                    .add_typed_validator(lambda v: Result.failure("too big") if v > 10 else Result.success(v))
                    .add_typed_validator(self.record("after", lambda v: Result.success(v))))

        assert pipeline("11").error == "too big"
        assert self.calls == []
        assert pipeline("3") == Result.success(3)

    def test_stages_may_return_plain_values_or_raise(self):
        def must_be_even(value):
            if value % 2:
                raise ValidationError("Value should be even")
            return value

        pipeline = (ValidatorPipeline()
                    .add_string_validator(str.strip)
                    .set_parser(int)
                    .add_typed_validator(must_be_even))

        assert pipeline(" 4 ") == Result.success(4)
        assert pipeline(" 5 ").error == "Value should be even"

    def test_validate_typed_runs_only_typed_steps(self):
        pipeline = (ValidatorPipeline()
                    .add_string_validator(lambda v: Result.failure("text stage"))
                    .set_parser(lambda v: Result.failure("parser"))
                    .add_typed_validator(lambda v: Result.success(v + 1)))

        assert pipeline.validate_typed(1) == Result.success(2)

    def test_validate_text_runs_only_string_steps(self):
        pipeline = (ValidatorPipeline()
                    .add_string_validator(lambda v: Result.success(v.strip()))
                    .set_parser(lambda v: Result.failure("parser")))

        assert pipeline.validate_text("  a  ") == Result.success("a")

    def test_pipeline_is_reusable(self):
        pipeline = ValidatorPipeline().set_parser(lambda v: Result.success(int(v)))

        assert pipeline("1").value == 1
        assert pipeline("2").value == 2


class TestResult:

    def test_truthiness(self):
        assert Result.success(0)
        assert not Result.failure("error")

    def test_unwrap(self):
        assert Result.success(5).unwrap() == 5
        with pytest.raises(ValidationError, match="broken"):
            Result.failure("broken").unwrap()

    def test_repr(self):
        assert repr(Result.success(1)) == "Result.success(1)"
        assert repr(Result.failure("x")) == "Result.failure('x')"

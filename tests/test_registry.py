"""Tests for rule lookup by kind."""

import logging

import pytest

from s3hygiene.errors import ParameterError, UnknownRuleError, Violation
from s3hygiene.registry import (
    SANITIZERS,
    VALIDATORS,
    get_sanitizer,
    get_validator,
    is_valid,
    resolve_kind,
    sanitize,
    validate,
)
from s3hygiene.rules import RuleKind
from s3hygiene.sanitize import sanitize_bucket
from s3hygiene.validation import validate_bucket


class TestResolveKind:
    """Tests for resolve_kind()."""

    def test_enum_passthrough(self):
        assert resolve_kind(RuleKind.BUCKET) is RuleKind.BUCKET

    def test_string_value(self):
        assert resolve_kind("extra_query_string") is RuleKind.EXTRA_QUERY_STRING

    def test_unknown_name(self):
        with pytest.raises(UnknownRuleError) as exc_info:
            resolve_kind("bucketName")
        assert exc_info.value.name == "bucketName"
        assert "bucketName" in str(exc_info.value)


class TestTables:
    """The lookup tables are complete and read-only."""

    def test_every_kind_has_sanitizer(self):
        assert set(SANITIZERS) == set(RuleKind)

    def test_validated_kinds(self):
        assert set(VALIDATORS) == {
            RuleKind.ACCESS_KEY,
            RuleKind.SECRET_KEY,
            RuleKind.OBJECT_KEY,
            RuleKind.BUCKET,
            RuleKind.REGION,
            RuleKind.ENDPOINT,
            RuleKind.DURATION,
            RuleKind.EXTRA_QUERY_STRING,
        }

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            SANITIZERS[RuleKind.BUCKET] = str  # type: ignore[index]


class TestLookup:
    """Tests for get_sanitizer() and get_validator()."""

    def test_get_sanitizer_by_name(self):
        assert get_sanitizer("bucket") is sanitize_bucket

    def test_get_validator_by_kind(self):
        assert get_validator(RuleKind.BUCKET) is validate_bucket

    def test_validator_missing_for_kind(self):
        """Kinds without a validator raise UnknownRuleError, not KeyError."""
        with pytest.raises(UnknownRuleError) as exc_info:
            get_validator("html")
        assert exc_info.value.family == "validator"

    def test_unknown_rule_is_not_parameter_error(self):
        """A missing rule is a programming error, not a rejected value."""
        with pytest.raises(UnknownRuleError) as exc_info:
            get_sanitizer("nope")
        assert not isinstance(exc_info.value, ParameterError)
        assert isinstance(exc_info.value, LookupError)


class TestDispatch:
    """Tests for sanitize(), validate() and is_valid()."""

    def test_sanitize(self):
        assert sanitize("object_key", "my_folder/my_file.txt*") == "my_folder/my_file.txt"

    def test_sanitize_duration(self):
        assert sanitize(RuleKind.DURATION, -60) == 60

    def test_validate_returns_result(self):
        result = validate("bucket", "ab")
        assert result.violation is Violation.LENGTH_OUT_OF_BOUNDS

    def test_is_valid_true(self):
        assert is_valid("bucket", "my-bucket") is True

    def test_is_valid_false(self):
        assert is_valid("region", "US_EAST") is False

    def test_is_valid_unknown_rule_raises(self):
        with pytest.raises(UnknownRuleError):
            is_valid("period", 60)

    def test_failure_logged_with_extras(self, caplog):
        """Failures are logged at DEBUG with the rule and violation attached."""
        caplog.set_level(logging.DEBUG, logger="s3hygiene.registry")
        validate("bucket", "ab")
        records = [r for r in caplog.records if r.name == "s3hygiene.registry"]
        assert records
        assert records[0].rule == "bucket"
        assert records[0].violation == "LengthOutOfBounds"

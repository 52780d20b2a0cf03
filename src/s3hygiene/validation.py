"""S3 parameter validation.

Each ``validate_*`` function inspects a value without changing it and returns
a :class:`ValidationResult`.  Nothing here raises for bad input; callers that
prefer exceptions call :meth:`ValidationResult.raise_for_violation`, which
raises the matching :class:`~s3hygiene.errors.ParameterError` subclass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from s3hygiene.errors import ERRORS_BY_VIOLATION, Violation
from s3hygiene.rules import (
    ALLOWED_CHARACTERS,
    AWS_KEY_RE,
    BUCKET_MAX_LENGTH,
    BUCKET_MIN_LENGTH,
    BUCKET_RE,
    DOMAIN_STRIP_RE,
    ENDPOINT_TLD_RE,
    OBJECT_KEY_RE,
    QUERY_STRING_RE,
    REGION_RE,
    RuleKind,
)
from s3hygiene.sanitize import strip_protocol
from s3hygiene.urls import is_valid_url


@dataclass(frozen=True)
class ValidationResult:
    """The outcome of validating a single value.

    Attributes:
        rule: The rule kind the value was checked against.
        violation: The broken rule, or None when the value is valid.
        message: Human-readable description of the failure ("" when valid).
    """

    rule: RuleKind
    violation: Violation | None = None
    message: str = ""

    @property
    def valid(self) -> bool:
        return self.violation is None

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_violation(self) -> None:
        """Raise the ParameterError matching this result, if any.

        Raises:
            ParameterError: A subclass chosen by ``violation``.
        """
        if self.violation is None:
            return
        raise ERRORS_BY_VIOLATION[self.violation](self.message, rule=self.rule.value)


def _ok(rule: RuleKind) -> ValidationResult:
    return ValidationResult(rule)


def _fail(rule: RuleKind, violation: Violation, message: str) -> ValidationResult:
    return ValidationResult(rule, violation, message)


def _match_pattern(
    rule: RuleKind, label: str, value: Any, pattern: re.Pattern[str]
) -> ValidationResult:
    """Shared non-empty + whole-value pattern check for string rules."""
    if value is None or value == "":
        return _fail(rule, Violation.EMPTY, f"{label} cannot be empty.")
    if not isinstance(value, str) or not pattern.fullmatch(value):
        return _fail(
            rule,
            Violation.INVALID_CHARACTERS,
            f"Invalid {label.lower()} characters. Only {ALLOWED_CHARACTERS[rule]} are allowed.",
        )
    return _ok(rule)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_access_key(access_key: Any) -> ValidationResult:
    """Validate an AWS access key ID (non-empty, alphanumeric)."""
    return _match_pattern(RuleKind.ACCESS_KEY, "Access key ID", access_key, AWS_KEY_RE)


def validate_secret_key(secret_key: Any) -> ValidationResult:
    """Validate an AWS secret access key (non-empty, alphanumeric)."""
    return _match_pattern(RuleKind.SECRET_KEY, "Secret key", secret_key, AWS_KEY_RE)


def validate_object_key(object_key: Any) -> ValidationResult:
    """Validate an S3 object key.

    Example:
        ``"my_folder/my_file.txt*"`` fails with INVALID_CHARACTERS.
    """
    return _match_pattern(RuleKind.OBJECT_KEY, "Object key", object_key, OBJECT_KEY_RE)


def validate_bucket(bucket: Any) -> ValidationResult:
    """Validate a bucket name.

    The name must be 3-63 characters long and use only lowercase letters,
    digits, hyphens and dots.  Length is checked before characters.

    Args:
        bucket: The candidate bucket name.

    Returns:
        The validation outcome.
    """
    rule = RuleKind.BUCKET
    if bucket is None or bucket == "":
        return _fail(rule, Violation.EMPTY, "Bucket name cannot be empty.")
    if not isinstance(bucket, str):
        return _fail(
            rule,
            Violation.INVALID_CHARACTERS,
            f"Invalid bucket name characters. Only {ALLOWED_CHARACTERS[rule]} are allowed.",
        )

    if len(bucket) < BUCKET_MIN_LENGTH or len(bucket) > BUCKET_MAX_LENGTH:
        return _fail(
            rule,
            Violation.LENGTH_OUT_OF_BOUNDS,
            f"Invalid bucket name length. It should be between {BUCKET_MIN_LENGTH} "
            f"and {BUCKET_MAX_LENGTH} characters.",
        )

    return _match_pattern(rule, "Bucket name", bucket, BUCKET_RE)


def validate_region(region: Any) -> ValidationResult:
    """Validate a region string such as ``us-west-1``."""
    return _match_pattern(RuleKind.REGION, "Region", region, REGION_RE)


def validate_endpoint(endpoint: Any) -> ValidationResult:
    """Validate an endpoint hostname.

    A leading ``http://``/``https://`` and trailing slashes are tolerated.
    What remains must form a valid ``https://`` URL, end in a top-level
    domain, and still be non-empty once characters that cannot appear in a
    hostname are stripped.

    Example:
        ``"https://my.endpoint.com/"`` is valid; ``"not a url"`` fails with
        MALFORMED_URL.
    """
    rule = RuleKind.ENDPOINT
    if endpoint is None or endpoint == "":
        return _fail(rule, Violation.EMPTY, "Endpoint cannot be empty.")
    if not isinstance(endpoint, str):
        return _fail(
            rule, Violation.MALFORMED_URL, "Invalid endpoint format. It should be a valid URL."
        )

    sanitized = strip_protocol(endpoint)

    if not is_valid_url("https://" + sanitized):
        return _fail(
            rule, Violation.MALFORMED_URL, "Invalid endpoint format. It should be a valid URL."
        )

    if not ENDPOINT_TLD_RE.search(sanitized):
        return _fail(rule, Violation.INVALID_TLD, "Invalid top-level domain in the endpoint.")

    # Unreachable while ENDPOINT_TLD_RE requires letters in the TLD.
    if not DOMAIN_STRIP_RE.sub("", sanitized):
        return _fail(
            rule,
            Violation.EMPTY_AFTER_SANITIZE,
            f"Invalid endpoint. Nothing is left after keeping only {ALLOWED_CHARACTERS[rule]}.",
        )

    return _ok(rule)


def validate_duration(duration: Any) -> ValidationResult:
    """Validate a presigned-URL duration in seconds.

    ``None`` is EMPTY, anything that is not an ``int`` (``bool`` included) is
    NOT_INTEGER, and zero or a negative number is NOT_POSITIVE.
    """
    rule = RuleKind.DURATION
    if duration is None:
        return _fail(rule, Violation.EMPTY, "Duration cannot be empty.")
    if isinstance(duration, bool) or not isinstance(duration, int):
        return _fail(rule, Violation.NOT_INTEGER, "Duration must be an integer.")
    if duration <= 0:
        return _fail(rule, Violation.NOT_POSITIVE, "Duration must be a positive integer.")
    return _ok(rule)


def validate_extra_query_string(query_string: Any) -> ValidationResult:
    """Validate an extra query string fragment; empty is allowed."""
    rule = RuleKind.EXTRA_QUERY_STRING
    if query_string is None or query_string == "":
        return _ok(rule)
    if not isinstance(query_string, str) or not QUERY_STRING_RE.fullmatch(query_string):
        return _fail(
            rule,
            Violation.INVALID_CHARACTERS,
            f"Invalid query string characters. Only {ALLOWED_CHARACTERS[rule]} are allowed.",
        )
    return _ok(rule)

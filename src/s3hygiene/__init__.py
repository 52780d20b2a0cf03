"""Sanitizers, validators and object-name encoding for S3 request parameters."""

from s3hygiene.errors import (
    EmptyAfterSanitize,
    EmptyValue,
    InvalidCharacters,
    InvalidTld,
    LengthOutOfBounds,
    MalformedUrl,
    NotInteger,
    NotPositive,
    ParameterError,
    UnknownRuleError,
    Violation,
)
from s3hygiene.registry import (
    SANITIZERS,
    VALIDATORS,
    get_sanitizer,
    get_validator,
    is_valid,
    sanitize,
    validate,
)
from s3hygiene.rules import RuleKind
from s3hygiene.sanitize import (
    sanitize_access_key,
    sanitize_bool,
    sanitize_bucket,
    sanitize_duration,
    sanitize_endpoint,
    sanitize_extra_query_string,
    sanitize_html,
    sanitize_key,
    sanitize_object_key,
    sanitize_region,
    sanitize_secret_key,
    sanitize_url,
)
from s3hygiene.serialization import decode_object_name, encode_object_name
from s3hygiene.validation import (
    ValidationResult,
    validate_access_key,
    validate_bucket,
    validate_duration,
    validate_endpoint,
    validate_extra_query_string,
    validate_object_key,
    validate_region,
    validate_secret_key,
)

__all__ = [
    "decode_object_name",
    "EmptyAfterSanitize",
    "EmptyValue",
    "encode_object_name",
    "get_sanitizer",
    "get_validator",
    "InvalidCharacters",
    "InvalidTld",
    "is_valid",
    "LengthOutOfBounds",
    "MalformedUrl",
    "NotInteger",
    "NotPositive",
    "ParameterError",
    "RuleKind",
    "sanitize",
    "sanitize_access_key",
    "sanitize_bool",
    "sanitize_bucket",
    "sanitize_duration",
    "sanitize_endpoint",
    "sanitize_extra_query_string",
    "sanitize_html",
    "sanitize_key",
    "sanitize_object_key",
    "sanitize_region",
    "sanitize_secret_key",
    "sanitize_url",
    "SANITIZERS",
    "UnknownRuleError",
    "validate",
    "validate_access_key",
    "validate_bucket",
    "validate_duration",
    "validate_endpoint",
    "validate_extra_query_string",
    "validate_object_key",
    "validate_region",
    "validate_secret_key",
    "ValidationResult",
    "VALIDATORS",
    "Violation",
]

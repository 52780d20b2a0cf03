"""Lookup of sanitizers and validators by rule kind.

Callers that only know a parameter's kind at runtime (for example from a
configuration file) resolve the function here instead of importing it
directly.  Unknown names raise :class:`~s3hygiene.errors.UnknownRuleError`,
which is distinct from a rejected value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from s3hygiene.errors import UnknownRuleError
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

logger = logging.getLogger(__name__)

Sanitizer = Callable[[Any], Any]
Validator = Callable[[Any], ValidationResult]

SANITIZERS: Mapping[RuleKind, Sanitizer] = MappingProxyType(
    {
        RuleKind.ACCESS_KEY: sanitize_access_key,
        RuleKind.SECRET_KEY: sanitize_secret_key,
        RuleKind.OBJECT_KEY: sanitize_object_key,
        RuleKind.BUCKET: sanitize_bucket,
        RuleKind.REGION: sanitize_region,
        RuleKind.ENDPOINT: sanitize_endpoint,
        RuleKind.DURATION: sanitize_duration,
        RuleKind.EXTRA_QUERY_STRING: sanitize_extra_query_string,
        RuleKind.KEY: sanitize_key,
        RuleKind.BOOL: sanitize_bool,
        RuleKind.HTML: sanitize_html,
        RuleKind.URL: sanitize_url,
    }
)

VALIDATORS: Mapping[RuleKind, Validator] = MappingProxyType(
    {
        RuleKind.ACCESS_KEY: validate_access_key,
        RuleKind.SECRET_KEY: validate_secret_key,
        RuleKind.OBJECT_KEY: validate_object_key,
        RuleKind.BUCKET: validate_bucket,
        RuleKind.REGION: validate_region,
        RuleKind.ENDPOINT: validate_endpoint,
        RuleKind.DURATION: validate_duration,
        RuleKind.EXTRA_QUERY_STRING: validate_extra_query_string,
    }
)

_missing = set(RuleKind) - set(SANITIZERS)
if _missing:
    raise RuntimeError(f"Rule kinds without a sanitizer: {sorted(k.value for k in _missing)}")
if not set(VALIDATORS) <= set(SANITIZERS):
    raise RuntimeError("Every validated rule kind needs a matching sanitizer")
del _missing


def resolve_kind(kind: RuleKind | str) -> RuleKind:
    """Turn a rule name into a RuleKind.

    Raises:
        UnknownRuleError: If ``kind`` names no rule.
    """
    if isinstance(kind, RuleKind):
        return kind
    try:
        return RuleKind(kind)
    except ValueError:
        raise UnknownRuleError(str(kind)) from None


def get_sanitizer(kind: RuleKind | str) -> Sanitizer:
    """Return the sanitizer registered for ``kind``."""
    return SANITIZERS[resolve_kind(kind)]


def get_validator(kind: RuleKind | str) -> Validator:
    """Return the validator registered for ``kind``.

    Raises:
        UnknownRuleError: If ``kind`` is unknown or has no validator.
    """
    rule = resolve_kind(kind)
    try:
        return VALIDATORS[rule]
    except KeyError:
        raise UnknownRuleError(rule.value, family="validator") from None


def sanitize(kind: RuleKind | str, value: Any) -> Any:
    """Sanitize ``value`` with the rule registered for ``kind``."""
    return get_sanitizer(kind)(value)


def validate(kind: RuleKind | str, value: Any) -> ValidationResult:
    """Validate ``value`` with the rule registered for ``kind``."""
    result = get_validator(kind)(value)
    if not result.valid:
        logger.debug(
            "Validation failed: %s",
            result.message,
            extra={"rule": result.rule.value, "violation": result.violation.value},
        )
    return result


def is_valid(kind: RuleKind | str, value: Any) -> bool:
    """Return True if ``value`` passes the validator for ``kind``.

    Unknown rule names still raise UnknownRuleError rather than returning
    False.
    """
    return validate(kind, value).valid

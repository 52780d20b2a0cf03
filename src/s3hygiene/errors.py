"""Error definitions for s3hygiene."""

from enum import Enum


class Violation(str, Enum):
    """The specific rule a rejected value broke."""

    EMPTY = "Empty"
    INVALID_CHARACTERS = "InvalidCharacters"
    LENGTH_OUT_OF_BOUNDS = "LengthOutOfBounds"
    MALFORMED_URL = "MalformedUrl"
    INVALID_TLD = "InvalidTld"
    EMPTY_AFTER_SANITIZE = "EmptyAfterSanitize"
    NOT_INTEGER = "NotInteger"
    NOT_POSITIVE = "NotPositive"


class ParameterError(ValueError):
    """A parameter value that failed validation.

    Attributes:
        code: The violation code string (e.g. "InvalidCharacters").
        message: Human-readable error description.
        rule: The rule kind that rejected the value (e.g. "bucket").
        extra_fields: Additional key-value pairs describing the failure.
    """

    violation: Violation

    def __init__(
        self,
        message: str,
        rule: str = "",
        extra_fields: dict[str, str] | None = None,
    ) -> None:
        """Initialize the parameter error.

        Args:
            message: Error description.
            rule: Name of the rule that failed.
            extra_fields: Optional extra context.
        """
        super().__init__(message)
        self.code = self.violation.value
        self.message = message
        self.rule = rule
        self.extra_fields = extra_fields or {}


# -- One subclass per violation ------------------------------------------------


class EmptyValue(ParameterError):
    """The value was empty or missing."""

    violation = Violation.EMPTY


class InvalidCharacters(ParameterError):
    """The value contains characters outside the allowed set."""

    violation = Violation.INVALID_CHARACTERS


class LengthOutOfBounds(ParameterError):
    """The value is too short or too long."""

    violation = Violation.LENGTH_OUT_OF_BOUNDS


class MalformedUrl(ParameterError):
    """The value does not form a syntactically valid URL."""

    violation = Violation.MALFORMED_URL


class InvalidTld(ParameterError):
    """The hostname does not end in a valid top-level domain."""

    violation = Violation.INVALID_TLD


class EmptyAfterSanitize(ParameterError):
    """Nothing was left once invalid characters were stripped."""

    violation = Violation.EMPTY_AFTER_SANITIZE


class NotInteger(ParameterError):
    """The value is not an integer."""

    violation = Violation.NOT_INTEGER


class NotPositive(ParameterError):
    """The integer is zero or negative."""

    violation = Violation.NOT_POSITIVE


ERRORS_BY_VIOLATION: dict[Violation, type[ParameterError]] = {
    cls.violation: cls
    for cls in (
        EmptyValue,
        InvalidCharacters,
        LengthOutOfBounds,
        MalformedUrl,
        InvalidTld,
        EmptyAfterSanitize,
        NotInteger,
        NotPositive,
    )
}


class UnknownRuleError(LookupError):
    """No sanitizer or validator is registered under the requested name.

    This is a programming error in the caller, not a rejected value.
    """

    def __init__(self, name: str, family: str = "rule") -> None:
        super().__init__(f"No {family} is registered under '{name}'.")
        self.name = name
        self.family = family

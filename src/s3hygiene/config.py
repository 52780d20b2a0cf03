"""Configuration loading and Pydantic models for the s3hygiene CLI.

The rule functions themselves take no configuration.  A config file holds
the CLI's logging settings and an optional S3 connection profile that the
``check`` command runs through the validators.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from s3hygiene.registry import validate
from s3hygiene.rules import RuleKind
from s3hygiene.validation import ValidationResult

logger = logging.getLogger(__name__)


class LoggingConfig(BaseModel):
    """Log level and output format."""

    level: str = "INFO"
    format: str = "text"


class ProfileConfig(BaseModel):
    """An S3 connection profile whose parameters should be checked."""

    bucket: str = ""
    region: str = ""
    endpoint: str = ""
    access_key: str = ""
    secret_key: str = ""
    duration: int = 3600
    extra_query_string: str = ""
    object_key: str = ""


class HygieneConfig(BaseModel):
    """Top-level s3hygiene configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)


# Profile fields that are only checked when set.
_OPTIONAL_FIELDS = frozenset({"endpoint", "object_key", "extra_query_string"})

_PROFILE_RULES: dict[str, RuleKind] = {
    "bucket": RuleKind.BUCKET,
    "region": RuleKind.REGION,
    "endpoint": RuleKind.ENDPOINT,
    "access_key": RuleKind.ACCESS_KEY,
    "secret_key": RuleKind.SECRET_KEY,
    "duration": RuleKind.DURATION,
    "extra_query_string": RuleKind.EXTRA_QUERY_STRING,
    "object_key": RuleKind.OBJECT_KEY,
}


def _parse_logging(data: dict[str, Any] | None) -> dict[str, Any]:
    """Parse the logging section from YAML data into a dict for Pydantic."""
    if data is None:
        return {}
    return {
        "level": str(data.get("level", "INFO")).upper(),
        "format": data.get("format", "text"),
    }


def _parse_profile(data: dict[str, Any] | None) -> dict[str, Any]:
    """Parse the profile section from YAML data.

    Accepts ``credentials.access_key``/``credentials.secret_key`` nested
    under the profile as well as the flat keys.
    """
    if data is None:
        return {}
    result = {name: data[name] for name in _PROFILE_RULES if name in data}
    credentials = data.get("credentials")
    if isinstance(credentials, dict):
        for name in ("access_key", "secret_key"):
            if name in credentials:
                result[name] = credentials[name]
    return result


def load_config(path: Path) -> HygieneConfig:
    """Load a HygieneConfig from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A fully populated HygieneConfig validated by Pydantic.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If a field has the wrong type.
    """
    with open(path, "r") as fh:
        raw: dict[str, Any] = yaml.safe_load(fh) or {}

    return HygieneConfig(
        logging=LoggingConfig(**_parse_logging(raw.get("logging"))),
        profile=ProfileConfig(**_parse_profile(raw.get("profile"))),
    )


def check_profile(profile: ProfileConfig) -> dict[str, ValidationResult]:
    """Validate every relevant field of a connection profile.

    Returns:
        A mapping of field name to failed result; empty when all pass.
    """
    failures: dict[str, ValidationResult] = {}
    for name, rule in _PROFILE_RULES.items():
        value = getattr(profile, name)
        if name in _OPTIONAL_FIELDS and value == "":
            continue
        result = validate(rule, value)
        if not result.valid:
            logger.info("Profile field %s rejected: %s", name, result.message, extra={"field": name})
            failures[name] = result
    return failures

"""Best-effort cleanup of S3 request parameters.

Sanitizers never raise.  Each one strips (or replaces) whatever falls outside
the rule set for its parameter kind and returns what is left, which may be an
empty string.  Whether the result is actually acceptable is the validators'
call, see :mod:`s3hygiene.validation`.
"""

import html
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from s3hygiene.rules import (
    AWS_KEY_STRIP_RE,
    BUCKET_STRIP_RE,
    DOMAIN_STRIP_RE,
    ENDPOINT_TLD_RE,
    KEY_STRIP_RE,
    OBJECT_KEY_STRIP_RE,
    PROTOCOL_RE,
    QUERY_STRING_STRIP_RE,
    REGION_STRIP_RE,
    URL_STRIP_RE,
)
from s3hygiene.urls import is_valid_url

logger = logging.getLogger(__name__)

_BOOL_ADAPTER = TypeAdapter(bool)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def strip_protocol(endpoint: str) -> str:
    """Drop trailing slashes and a leading ``http://`` or ``https://``."""
    return PROTOCOL_RE.sub("", endpoint.rstrip("/"))


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


def sanitize_access_key(access_key: Any) -> str:
    """Remove every non-alphanumeric character from an access key ID."""
    return AWS_KEY_STRIP_RE.sub("", _as_text(access_key))


def sanitize_secret_key(secret_key: Any) -> str:
    """Remove every non-alphanumeric character from a secret access key."""
    return AWS_KEY_STRIP_RE.sub("", _as_text(secret_key))


# ---------------------------------------------------------------------------
# Objects, buckets, regions
# ---------------------------------------------------------------------------


def sanitize_object_key(object_key: Any) -> str:
    """Sanitize an S3 object key, keeping path separators.

    Example:
        >>> sanitize_object_key("my_folder/my_file.txt*")
        'my_folder/my_file.txt'
    """
    return OBJECT_KEY_STRIP_RE.sub("", _as_text(object_key))


def sanitize_bucket(bucket: Any) -> str:
    """Sanitize a bucket name.

    Only characters outside ``[a-z0-9.-]`` are removed; uppercase letters are
    dropped rather than lowercased.

    Example:
        >>> sanitize_bucket("My_Bucket-Name.123")
        'y-ucket-ame.123'
    """
    return BUCKET_STRIP_RE.sub("", _as_text(bucket))


def sanitize_region(region: Any) -> str:
    """Sanitize a region string.

    Example:
        >>> sanitize_region("us-west-1_extra")
        'us-west-1extra'
    """
    return REGION_STRIP_RE.sub("", _as_text(region))


def sanitize_endpoint(endpoint: Any) -> str:
    """Reduce an endpoint to a bare hostname without protocol.

    The value is rejected (an empty string is returned) when, once the
    protocol and trailing slashes are removed, it does not form a valid
    ``https://`` URL or does not end in a top-level domain such as ``.com``
    or ``.co.uk``.  Otherwise any character that cannot appear in a hostname
    is stripped, and the stripped hostname must itself still form a valid
    URL.

    Example:
        >>> sanitize_endpoint("https://my.endpoint.com/")
        'my.endpoint.com'

    Args:
        endpoint: The endpoint to sanitize.

    Returns:
        The hostname, or ``""`` if the endpoint was structurally unusable.
    """
    sanitized = strip_protocol(_as_text(endpoint))

    if not is_valid_url("https://" + sanitized):
        logger.debug("Endpoint rejected, not a valid URL: %r", endpoint)
        return ""

    if not ENDPOINT_TLD_RE.search(sanitized):
        logger.debug("Endpoint rejected, no valid TLD: %r", endpoint)
        return ""

    hostname = DOMAIN_STRIP_RE.sub("", sanitized)
    if not is_valid_url("https://" + hostname):
        logger.debug("Endpoint rejected, stripped hostname is not a valid URL: %r", endpoint)
        return ""

    return hostname


# ---------------------------------------------------------------------------
# Durations and query strings
# ---------------------------------------------------------------------------


def sanitize_duration(duration: Any) -> int:
    """Turn a duration into a non-negative integer.

    Negative values are flipped with ``abs()``.  Anything that is not an
    integer is passed through ``int()``; if that fails, ``0`` is returned.
    Zero stays zero, so the result is not guaranteed to pass
    :func:`~s3hygiene.validation.validate_duration`.
    """
    try:
        return abs(int(duration))
    except (TypeError, ValueError, OverflowError):
        return 0


def sanitize_extra_query_string(query_string: Any) -> str:
    """Remove unsafe characters from an extra query string fragment."""
    return QUERY_STRING_STRIP_RE.sub("", _as_text(query_string))


# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


def sanitize_key(key: Any) -> str:
    """Normalize a generic key to lowercase letters, digits, ``_`` and ``-``.

    Strings and numbers are converted to text, trimmed and lowercased before
    stripping.  Any other type yields an empty string.
    """
    if not isinstance(key, (str, int, float)):
        return ""
    return KEY_STRIP_RE.sub("", str(key).strip().lower())


def sanitize_bool(data: Any) -> bool:
    """Coerce a value to a boolean.

    ``"1"``, ``"true"``, ``"yes"`` and ``"on"`` (any case) are true; values
    that do not coerce cleanly, including ``None`` and ``""``, are false.
    """
    if isinstance(data, str):
        data = data.strip()
    try:
        return _BOOL_ADAPTER.validate_python(data)
    except ValidationError:
        return False


def sanitize_html(data: Any) -> str:
    """Escape ``& < > " '`` for safe embedding in HTML text."""
    return html.escape(_as_text(data), quote=True)


def sanitize_url(url: Any) -> str:
    """Strip characters that cannot appear in a URL and re-validate it.

    Returns:
        The cleaned URL, or ``""`` if it still is not a valid URL.
    """
    clean_url = URL_STRIP_RE.sub("", _as_text(url))
    if is_valid_url(clean_url):
        return clean_url
    logger.debug("URL rejected after cleanup: %r", url)
    return ""

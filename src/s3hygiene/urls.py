"""Generic URL syntax checks backed by pydantic's URL parser."""

from pydantic import AnyUrl, TypeAdapter, ValidationError

from s3hygiene.rules import URL_FORBIDDEN_RE

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_valid_url(value: str) -> bool:
    """Return True if ``value`` parses as an absolute URL.

    The URL must carry a scheme, and ``http``/``https`` URLs need a host
    free of forbidden characters such as spaces.  Values containing
    whitespace, control characters, non-ASCII characters or backslashes are
    rejected before parsing, since the parser would otherwise rewrite them
    into a different URL.

    Args:
        value: The candidate URL.

    Returns:
        Whether the value is syntactically a URL.
    """
    if not value or URL_FORBIDDEN_RE.search(value):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True

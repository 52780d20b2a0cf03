"""Character-class rule tables shared by the sanitizers and validators.

Every pattern comes in two shapes: a ``*_STRIP_RE`` that matches the
characters a sanitizer removes, and a ``*_RE`` that a validator matches
against the whole value.  Keep each pair in sync; the sanitizers promise to
produce output the validators accept.
"""

import re
from enum import Enum


class RuleKind(str, Enum):
    """Identifiers for every parameter kind the package knows about."""

    ACCESS_KEY = "access_key"
    SECRET_KEY = "secret_key"
    OBJECT_KEY = "object_key"
    BUCKET = "bucket"
    REGION = "region"
    ENDPOINT = "endpoint"
    DURATION = "duration"
    EXTRA_QUERY_STRING = "extra_query_string"
    KEY = "key"
    BOOL = "bool"
    HTML = "html"
    URL = "url"


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

# Access key IDs and secret access keys: ASCII letters and digits only.
AWS_KEY_STRIP_RE = re.compile(r"[^A-Za-z0-9]")
AWS_KEY_RE = re.compile(r"[A-Za-z0-9]+")

# ---------------------------------------------------------------------------
# Object keys and buckets
# ---------------------------------------------------------------------------

OBJECT_KEY_STRIP_RE = re.compile(r"[^a-zA-Z0-9\-_./]")
OBJECT_KEY_RE = re.compile(r"[a-zA-Z0-9\-_./]*")

# Bucket names: lowercase letters, digits, hyphens and periods, 3-63 chars.
BUCKET_STRIP_RE = re.compile(r"[^a-z0-9\-.]")
BUCKET_RE = re.compile(r"[a-z0-9\-.]+")
BUCKET_MIN_LENGTH = 3
BUCKET_MAX_LENGTH = 63

# ---------------------------------------------------------------------------
# Regions and endpoints
# ---------------------------------------------------------------------------

REGION_STRIP_RE = re.compile(r"[^a-z0-9\-]")
REGION_RE = re.compile(r"[a-z0-9\-]+")

# A leading scheme, removed before an endpoint is checked.
PROTOCOL_RE = re.compile(r"^https?://")

# A period followed by two or more lowercase letters, optionally followed by
# a second such label, anchored at the end (".com", ".co.uk").
ENDPOINT_TLD_RE = re.compile(r"\.[a-z]{2,}(?:\.[a-z]{2,})?$")

DOMAIN_STRIP_RE = re.compile(r"[^a-zA-Z0-9\-.]")

# ---------------------------------------------------------------------------
# Query strings and generic keys
# ---------------------------------------------------------------------------

QUERY_STRING_STRIP_RE = re.compile(r"[^a-zA-Z0-9\-_=&]")
QUERY_STRING_RE = re.compile(r"[a-zA-Z0-9\-_=&]*")

KEY_STRIP_RE = re.compile(r"[^a-z0-9_\-]")

# Characters that may appear in a URL at all: letters, digits and
# $-_.+!*'(),{}|\^~[]`<>#%";/?:@&=
URL_STRIP_RE = re.compile(r"[^A-Za-z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]")

# Whitespace, control characters, anything outside ASCII, and backslashes.
# The URL parser would silently drop, encode or rewrite these; a URL that
# contains one is rejected instead.
URL_FORBIDDEN_RE = re.compile(r"[^\x21-\x7e]|\\")

# ---------------------------------------------------------------------------
# Human-readable descriptions used in validation messages
# ---------------------------------------------------------------------------

ALLOWED_CHARACTERS: dict[RuleKind, str] = {
    RuleKind.ACCESS_KEY: "letters and digits",
    RuleKind.SECRET_KEY: "letters and digits",
    RuleKind.OBJECT_KEY: "letters, digits, hyphens, underscores, dots and slashes",
    RuleKind.BUCKET: "lowercase letters, digits, hyphens and dots",
    RuleKind.REGION: "lowercase letters, digits and hyphens",
    RuleKind.ENDPOINT: "letters, digits, hyphens and dots",
    RuleKind.EXTRA_QUERY_STRING: "letters, digits, hyphens, underscores, '=' and '&'",
}

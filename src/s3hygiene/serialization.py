"""Object-name encoding for S3 request paths.

Object keys may hold spaces and reserved characters.  These helpers turn a
key into a percent-encoded form that is safe in a URL path while leaving
``/`` readable, and back again.

A literal ``+`` in a key is treated as an already-decoded space by
:func:`encode_object_name`, so keys containing ``+`` do not survive a round
trip.  Callers that need a literal plus sign must not rely on this codec.
"""

import urllib.parse


def encode_object_name(key: str) -> str:
    """Percent-encode an object key, keeping ``/`` as a path separator.

    Every character outside ``A-Z a-z 0-9 - _ . ~`` is encoded.

    Example:
        >>> encode_object_name("my folder/my file.txt")
        'my%20folder/my%20file.txt'

    Args:
        key: The raw object key.

    Returns:
        The encoded key.
    """
    key = key.replace("+", " ")
    return urllib.parse.quote(key, safe="/")


def decode_object_name(key: str) -> str:
    """Decode an object key produced by :func:`encode_object_name`.

    Literal spaces are turned into ``+`` first; ``+`` itself is never
    decoded to a space.

    Example:
        >>> decode_object_name("my%20folder/my%20file.txt")
        'my folder/my file.txt'
    """
    return urllib.parse.unquote(key.replace(" ", "+"))

"""Shortcode generation utility

This module provides a helper function for deriving a short, deterministic
identifier from a URL's content.

Functions:
    generate_shortcode(url, length=SHORTCODE_LENGTH):
        Return the first `length` hex characters of the URL's SHA-1 digest.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode('https://example.com')
    '327c3fda87'
"""

import hashlib

from urlshortener.constants import SHORTCODE_LENGTH


# hex-encoded SHA-1 digest length
MAX_LENGTH = 40


def generate_shortcode(url: str, length: int = SHORTCODE_LENGTH) -> str:
    """Generate a short, deterministic shortcode from a URL.

    The URL's raw UTF-8 bytes are hashed with SHA-1, hex-encoded and
    truncated. Identical URL strings always yield identical shortcodes.
    No normalization is applied: 'https://example.com' and
    'https://example.com/' are different URLs.

    Args:
        url (str):
            URL to derive the shortcode from. May be empty.

        length (int, optional):
            Number of hex characters to keep. Defaults to 10.

    Returns:
        str: Lowercase hex shortcode of exactly `length` characters.

    Raises:
        TypeError: If `url` is not a string.
        ValueError: If `length` is outside 1..40.

    NOTE:
        - Distinct URLs may share a prefix. Collisions are not resolved here,
          the data store rejects the second mapping.
    """
    if not isinstance(url, str):
        raise TypeError(f'URL must be of type string (given type: {type(url)}).')
    if not 1 <= length <= MAX_LENGTH:
        raise ValueError(f'Length must be between 1 and {MAX_LENGTH} (given value: {length}).')

    return hashlib.sha1(url.encode('utf-8')).hexdigest()[:length]  # noqa: S324

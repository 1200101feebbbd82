"""Utility functions for identifier normalization and tokenization."""

import re

_SEPARATORS = re.compile(r"[_\s./-]")
# Split before an uppercase letter that follows a non-uppercase character,
# and on digits, underscores and whitespace.
_TOKEN_BOUNDARY = re.compile(r"(?<=[^A-Z])(?=[A-Z])|[_\s\d]")


def normalize(value: str) -> str:
    """Lowercase a string and strip separator characters.

    Args:
        value: Any string.

    Returns:
        The normalized form, used only for metric computation.
    """
    return _SEPARATORS.sub("", value.lower())


def tokenize(identifier: str) -> list[str]:
    """Split an identifier into lowercase word tokens.

    Examples:
        >>> tokenize("fetchUserData")
        ['fetch', 'user', 'data']
        >>> tokenize("HTTP_status2xx")
        ['http', 'status', 'xx']

    Args:
        identifier: Identifier in camelCase, snake_case or mixed style.

    Returns:
        Non-empty lowercase tokens in source order.
    """
    pieces = _TOKEN_BOUNDARY.split(identifier)
    return [piece.lower() for piece in pieces if piece]


def common_prefix_length(a: str, b: str) -> int:
    """Length of the common prefix of two strings."""
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def has_substring_match(a: str, b: str) -> bool:
    """Check whether either normalized string contains the other.

    Empty normalized strings never match.
    """
    norm_a = normalize(a)
    norm_b = normalize(b)
    if not norm_a or not norm_b:
        return False
    return norm_a in norm_b or norm_b in norm_a

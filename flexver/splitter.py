"""
Literal string splitting.

Splits on a plain delimiter (never a pattern) and always hands back a list,
so callers never need to special-case zero or one element results.
"""

from typing import List


def split_literal(text: str, delimiter: str) -> List[str]:
    """
    Split ``text`` on the literal ``delimiter``.

    An empty delimiter splits between every character and keeps the empty
    bookends at both ends: ``split_literal("ab", "")`` gives
    ``["", "a", "b", ""]``.

    Args:
        text: String to split
        delimiter: Literal delimiter (regex metacharacters are not special)

    Returns:
        List of substrings, never empty
    """
    if delimiter == "":
        return [""] + list(text) + [""]
    return text.split(delimiter)

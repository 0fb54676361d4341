"""Lexicographical comparison of strings."""


def lexicographical_compare(a: str, b: str) -> int:
    """Compare two strings lexicographically.

    Negative when ``a`` sorts first, zero when equal, positive otherwise.
    The first differing characters decide; failing that, the shorter string
    sorts first and the result is the difference in length.
    """
    for char_a, char_b in zip(a, b):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    return len(a) - len(b)
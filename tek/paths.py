"""paths.py
Pure string helpers used by processors to derive related filenames.

None of these touch the filesystem: a processor must be able to claim and
plan a file that does not exist yet.
"""
from __future__ import annotations

__all__ = [
    "string_ends_with",
    "basename_len",
    "string_index",
    "strip_suffix",
    "splice_out",
    "dirname_of",
]


def string_ends_with(string: str, end: str) -> bool:
    """Return True when *string* ends with *end*."""
    if len(end) > len(string):
        return False
    return string[len(string) - len(end):] == end


def basename_len(string: str) -> int:
    """Length of the directory portion of *string*.

    This is the offset of the last ``/``, or 0 when the string has no
    directory part at all.
    """
    index = string.rfind("/")
    return index if index >= 0 else 0


def string_index(haystack: str, needle: str) -> int:
    """Offset of the first occurrence of *needle* in *haystack*, or -1."""
    return haystack.find(needle)


def strip_suffix(string: str, n: int) -> str:
    """Remove exactly the last *n* characters of *string*.

    This is fixed-width removal, not extension parsing: ``strip_suffix("a.b.pdf", 4)``
    is ``"a.b"`` whatever the characters are.
    """
    if n < 0 or n > len(string):
        raise ValueError(f"Cannot strip {n} characters from {string!r}")
    return string[:len(string) - n]


def splice_out(string: str, start: int, end: int) -> str:
    """Remove the half-open range ``[start, end)`` from *string*."""
    if not 0 <= start <= end <= len(string):
        raise ValueError(f"Invalid range [{start}, {end}) for {string!r}")
    return string[:start] + string[end:]


def dirname_of(string: str) -> str:
    """Directory portion of *string*, without the trailing separator."""
    return string[:basename_len(string)]

# SPDX-License-Identifier: MIT
"""Precedence primitives for semantic version comparison.

These helpers operate on plain integers and prerelease strings so they can be
shared by the Version type and the module-level comparison functions.
"""

from __future__ import annotations

from typing import Optional

MAX_SEGMENT = 2**64 - 1

_DIGITS = frozenset("0123456789")


def parse_uint(text: str) -> Optional[int]:
    """Parse an unsigned 64-bit integer, returning None if not possible.

    Only ASCII digits are accepted; signs, whitespace and values beyond
    64 bits yield None.
    """
    if not text or not _DIGITS.issuperset(text):
        return None
    value = int(text)
    if value > MAX_SEGMENT:
        return None
    return value


def compare_segment(a: int, b: int) -> int:
    """Compare two numeric version segments."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_pre_part(s: str, o: str) -> int:
    """Compare a single prerelease identifier against another.

    Returns:
        -1, 0 or 1. A missing identifier (empty string) sorts below a
        present one. Numeric identifiers sort below alphanumeric ones and
        compare numerically with each other; alphanumeric identifiers compare
        in ASCII order.
    """
    if s == o:
        return 0

    if s == "":
        return -1 if o != "" else 1

    if o == "":
        return 1 if s != "" else -1

    s_num = parse_uint(s)
    o_num = parse_uint(o)

    if s_num is None and o_num is None:
        return 1 if s > o else -1
    if o_num is None:
        # s is numeric, o is alphanumeric
        return -1
    if s_num is None:
        return 1

    return 1 if s_num > o_num else -1


def compare_prerelease(a: str, b: str) -> int:
    """Compare two dot-separated prerelease strings.

    Identifiers are compared position by position up to the longer of the
    two sequences, using an empty placeholder where one side has run out.
    """
    a_parts = a.split(".")
    b_parts = b.split(".")

    for i in range(max(len(a_parts), len(b_parts))):
        a_part = a_parts[i] if i < len(a_parts) else ""
        b_part = b_parts[i] if i < len(b_parts) else ""

        d = compare_pre_part(a_part, b_part)
        if d != 0:
            return d

    return 0

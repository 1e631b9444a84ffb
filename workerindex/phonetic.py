"""Phonetic name encoding (Soundex) and similarity."""

from __future__ import annotations

_SOUNDEX_DIGITS = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
}


def soundex(name: str) -> str:
    """Return the four-character Soundex code of ``name``, or "" if it has no letters."""
    letters = [c for c in name.strip().upper() if c.isascii() and c.isalpha()]
    if not letters:
        return ""

    first, *rest = letters
    code = [first]
    last_digit = _SOUNDEX_DIGITS.get(first)

    for letter in rest:
        if len(code) >= 4:
            break
        digit = _SOUNDEX_DIGITS.get(letter)
        if digit is not None and digit != last_digit:
            code.append(digit)
        last_digit = digit

    return "".join(code).ljust(4, "0")


def soundex_match(name1: str, name2: str) -> bool:
    """Whether two names share a non-empty Soundex code."""
    s1 = soundex(name1)
    s2 = soundex(name2)
    return bool(s1) and bool(s2) and s1 == s2


def phonetic_similarity(name1: str, name2: str) -> float:
    """Score two names by their Soundex codes.

    Identical codes score 1.0; otherwise each matching leading character
    of the code is worth a quarter.
    """
    s1 = soundex(name1)
    s2 = soundex(name2)
    if not s1 or not s2:
        return 0.0
    if s1 == s2:
        return 1.0

    matching = 0
    for a, b in zip(s1, s2):
        if a != b:
            break
        matching += 1
    return matching / 4.0
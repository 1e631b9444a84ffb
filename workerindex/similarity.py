"""String similarity measures used for fuzzy name and address matching."""

from __future__ import annotations


def jaro(a: str, b: str) -> float:
    """Jaro similarity of two strings, between 0.0 and 1.0."""
    a_len = len(a)
    b_len = len(b)
    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    search_range = max(max(a_len, b_len) // 2 - 1, 0)
    a_flags = [False] * a_len
    b_flags = [False] * b_len
    matches = 0

    for i, a_char in enumerate(a):
        low = max(i - search_range, 0)
        high = min(b_len, i + search_range + 1)
        for j in range(low, high):
            if not b_flags[j] and b[j] == a_char:
                a_flags[i] = True
                b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    a_matched = (c for c, flag in zip(a, a_flags) if flag)
    b_matched = (c for c, flag in zip(b, b_flags) if flag)
    transpositions = sum(x != y for x, y in zip(a_matched, b_matched)) // 2

    return (
        matches / a_len
        + matches / b_len
        + (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler(a: str, b: str) -> float:
    """Jaro similarity boosted for a common prefix of up to four characters."""
    sim = jaro(a, b)
    if sim <= 0.7:
        return sim

    prefix = 0
    for x, y in zip(a[:4], b):
        if x != y:
            break
        prefix += 1
    return sim + 0.1 * prefix * (1.0 - sim)


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, a_char in enumerate(a, start=1):
        current = [i]
        for j, b_char in enumerate(b, start=1):
            cost = 0 if a_char == b_char else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def normalized_levenshtein(a: str, b: str) -> float:
    """Levenshtein distance scaled to a similarity between 0.0 and 1.0."""
    if not a and not b:
        return 1.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))
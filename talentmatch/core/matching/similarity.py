"""
Fuzzy string comparison.

Two strings are considered the same concept when one contains the other
or when their normalized Levenshtein similarity reaches a threshold.
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein

from talentmatch.utils.constants import DEFAULT_FUZZY_THRESHOLD


def edit_distance(a: str, b: str) -> int:
    """
    Unit-cost Levenshtein distance between two strings.

    Counts single-character insertions, deletions and substitutions over
    code points.
    """
    return Levenshtein.distance(a, b)


def similarity_ratio(a: Optional[str], b: Optional[str]) -> float:
    """
    Normalized similarity in [0, 1] after lower-casing both strings.

    Containment of one string in the other counts as 1.0; empty or missing
    input counts as 0.0.
    """
    if not a or not b:
        return 0.0

    a = a.lower()
    b = b.lower()

    if a in b or b in a:
        return 1.0

    max_len = max(len(a), len(b))
    return 1 - edit_distance(a, b) / max_len


def fuzzy_match(
    a: Optional[str],
    b: Optional[str],
    threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> bool:
    """
    Decide whether two strings name the same concept.

    Args:
        a: First string
        b: Second string
        threshold: Minimum normalized similarity

    Returns:
        False for empty input, True on substring containment (regardless of
        threshold, so "go" matches "golang"), otherwise whether
        1 - distance / max_len >= threshold
    """
    if not a or not b:
        return False

    a = a.lower()
    b = b.lower()

    # Containment short-circuits the threshold
    if a in b or b in a:
        return True

    return similarity_ratio(a, b) >= threshold

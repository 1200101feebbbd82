"""String similarity metrics for identifier typo detection.

Jaro and Jaro-Winkler capture character-level slips (transpositions, single
letter mistakes, shared prefixes). The composite score adds token overlap so
identifiers sharing whole words rank well even when their letters do not line
up, e.g. ``fetchUserData`` and ``userData``.
"""

from .consts import (
    LENGTH_PENALTY_CAP,
    LENGTH_PENALTY_PER_CHAR,
    PREFIX_BONUS_CAP,
    WEIGHT_CONTAINMENT,
    WEIGHT_JACCARD,
    WEIGHT_JARO_WINKLER,
    WEIGHT_PREFIX,
    WINKLER_PREFIX_CAP,
    WINKLER_SCALING,
)
from .models import SimilarityScore
from .utils import common_prefix_length, has_substring_match, normalize, tokenize


def _find_matches(
    a: str, b: str, window: int
) -> tuple[int, list[bool], list[bool]]:
    a_matched = [False] * len(a)
    b_matched = [False] * len(b)
    matches = 0

    for i, char in enumerate(a):
        start = max(0, i - window)
        end = min(i + window + 1, len(b))
        for j in range(start, end):
            if b_matched[j] or b[j] != char:
                continue
            a_matched[i] = True
            b_matched[j] = True
            matches += 1
            break

    return matches, a_matched, b_matched


def _count_transpositions(
    a: str, b: str, a_matched: list[bool], b_matched: list[bool]
) -> int:
    transpositions = 0
    k = 0
    for i, char in enumerate(a):
        if not a_matched[i]:
            continue
        while not b_matched[k]:
            k += 1
        if char != b[k]:
            transpositions += 1
        k += 1
    return transpositions


def jaro(a: str, b: str) -> SimilarityScore:
    """Compute the Jaro similarity of two strings.

    Args:
        a: First string.
        b: Second string.

    Returns:
        1.0 for identical strings, 0.0 when exactly one string is empty or no
        characters match within the window, otherwise the mean of the two match
        ratios and the transposition ratio.
    """
    if a == b:
        return SimilarityScore(1.0)
    if not a or not b:
        return SimilarityScore(0.0)

    window = max(0, max(len(a), len(b)) // 2 - 1)
    matches, a_matched, b_matched = _find_matches(a, b, window)
    if matches == 0:
        return SimilarityScore(0.0)

    transpositions = _count_transpositions(a, b, a_matched, b_matched)
    return SimilarityScore(
        (
            matches / len(a)
            + matches / len(b)
            + (matches - transpositions / 2) / matches
        )
        / 3
    )


def jaro_winkler(a: str, b: str) -> SimilarityScore:
    """Jaro similarity boosted by the length of the common prefix (capped at 4)."""
    base = jaro(a, b)
    prefix = min(common_prefix_length(a, b), WINKLER_PREFIX_CAP)
    return SimilarityScore(base + prefix * WINKLER_SCALING * (1 - base))


def jaccard_similarity(a: str, b: str) -> SimilarityScore:
    """Jaccard index of the identifier token sets of ``a`` and ``b``.

    Two identifiers without any tokens are considered identical; if only one
    of them has tokens the similarity is 0.
    """
    tokens_a = set(tokenize(a))
    tokens_b = set(tokenize(b))
    if not tokens_a and not tokens_b:
        return SimilarityScore(1.0)
    if not tokens_a or not tokens_b:
        return SimilarityScore(0.0)
    return SimilarityScore(len(tokens_a & tokens_b) / len(tokens_a | tokens_b))


def containment_score(a: str, b: str) -> SimilarityScore:
    return SimilarityScore(1.0 if has_substring_match(a, b) else 0.0)


def prefix_score(a: str, b: str) -> SimilarityScore:
    shared = common_prefix_length(normalize(a), normalize(b))
    return SimilarityScore(min(shared, PREFIX_BONUS_CAP) / PREFIX_BONUS_CAP)


def length_penalty(query: str, candidate: str) -> float:
    """Penalty for candidates longer than the query, in [0, 0.15].

    Only the candidate being longer is penalized.
    """
    extra = max(0, len(candidate) - len(query))
    return min(LENGTH_PENALTY_CAP, extra * LENGTH_PENALTY_PER_CHAR)


def composite_score(query: str, candidate: str) -> SimilarityScore:
    """Score how plausible ``candidate`` is as the intended spelling of ``query``.

    Weighted sum of Jaro-Winkler on the normalized strings (0.5), token Jaccard
    (0.3), containment (0.1) and capped common prefix (0.1), minus the length
    penalty, clamped to [0, 1].

    The argument order matters: the length penalty compares the candidate
    against the query and not the other way round.

    Args:
        query: The name the user wrote.
        candidate: A name that actually exists.

    Returns:
        The composite similarity score.
    """
    norm_query = normalize(query)
    norm_candidate = normalize(candidate)

    raw = (
        WEIGHT_JARO_WINKLER * jaro_winkler(norm_query, norm_candidate)
        + WEIGHT_JACCARD * jaccard_similarity(query, candidate)
        + WEIGHT_CONTAINMENT * containment_score(query, candidate)
        + WEIGHT_PREFIX * prefix_score(query, candidate)
        - length_penalty(query, candidate)
    )
    return SimilarityScore(raw)

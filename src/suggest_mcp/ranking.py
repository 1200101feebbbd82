"""Top-K ranking of suggestion candidates."""

from collections.abc import Callable, Iterable

from .candidates import is_admissible
from .consts import (
    MAX_SUGGESTIONS,
    MIN_SIMILARITY_SCORE,
    MODULE_PATH_LONG_QUERY,
    MODULE_PATH_MIN_SCORE_LONG,
    MODULE_PATH_MIN_SCORE_SHORT,
)
from .models import CandidateMode, Suggestion
from .similarity import composite_score

Threshold = float | Callable[[str], float]


def module_path_min_score(query: str) -> float:
    """Adaptive threshold for module path lookups.

    A one or two character slip moves the score of a short specifier more than
    that of a long one, so short specifiers need a stricter bar.

    Args:
        query: The requested module path.

    Returns:
        0.33 for queries of at least 10 characters, 0.35 otherwise.
    """
    if len(query) >= MODULE_PATH_LONG_QUERY:
        return MODULE_PATH_MIN_SCORE_LONG
    return MODULE_PATH_MIN_SCORE_SHORT


def rank(
    query: str,
    candidates: Iterable[str],
    min_score: Threshold = MIN_SIMILARITY_SCORE,
    mode: CandidateMode | str = CandidateMode.STANDARD,
) -> list[Suggestion]:
    """Rank candidates as corrections of ``query``.

    Candidates failing ``is_admissible`` are discarded, the rest are scored
    with ``composite_score``, entries below ``min_score`` are dropped, and the
    remainder is sorted by score (descending) then name (ascending) and
    truncated to ``MAX_SUGGESTIONS``.

    Args:
        query: The misspelled name.
        candidates: Names that actually exist. Duplicates are ignored.
        min_score: Threshold, or a callable computing it from the query
            (e.g. ``module_path_min_score``).
        mode: Admissibility rule set, "standard" or "export".

    Returns:
        At most five suggestions with non-increasing scores.
    """
    threshold = min_score(query) if callable(min_score) else min_score

    scored = []
    for name in dict.fromkeys(candidates):
        if not is_admissible(name, query, mode):
            continue
        score = composite_score(query, name)
        if score >= threshold:
            scored.append(Suggestion(name=name, score=score))

    scored.sort(key=lambda s: (-s.score, s.name))
    return scored[:MAX_SUGGESTIONS]


def ranking_cache_key(query: str, candidates: Iterable[str]) -> tuple:
    """Key under which a ranking of ``candidates`` for ``query`` can be memoized.

    Ranking ignores candidate order and duplicates, so the candidate pool is
    keyed as a sorted set. The query is kept verbatim since tokenization and
    the exact-match rule depend on its original spelling.
    """
    return (query, tuple(sorted(set(candidates))))

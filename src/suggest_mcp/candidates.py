"""Admissibility rules for suggestion candidates."""

from dataclasses import dataclass

from .models import CandidateMode


@dataclass(frozen=True)
class FilterRules:
    """Named configuration of the candidate admissibility predicate."""

    reserved_prefixes: tuple[str, ...]
    reserved_names: frozenset[str] = frozenset()


# `_name` conventionally marks a private member or import
STANDARD_RULES = FilterRules(reserved_prefixes=("_",))
# exports additionally hide `__internal` names and the literal `default`
EXPORT_RULES = FilterRules(
    reserved_prefixes=("_", "__"), reserved_names=frozenset({"default"})
)

RULES_BY_MODE: dict[CandidateMode, FilterRules] = {
    CandidateMode.STANDARD: STANDARD_RULES,
    CandidateMode.EXPORT: EXPORT_RULES,
}


def is_admissible(
    candidate: str,
    query: str,
    mode: CandidateMode | str = CandidateMode.STANDARD,
) -> bool:
    """Check whether ``candidate`` may be suggested as a correction of ``query``.

    A candidate is rejected when it is empty, equal to the query, starts with a
    reserved prefix of the mode, or is one of the mode's reserved names.

    Args:
        candidate: Name offered by a candidate provider.
        query: The name being corrected.
        mode: "standard" for members and imports, "export" for module exports.

    Returns:
        True if every rule of the mode accepts the candidate.

    Raises:
        ValueError: If ``mode`` is not a known mode name (a programming error).
    """
    rules = RULES_BY_MODE[CandidateMode(mode)]
    return (
        bool(candidate)
        and candidate != query
        and not candidate.startswith(rules.reserved_prefixes)
        and candidate not in rules.reserved_names
    )


def is_module_candidate(candidate: str, requested: str) -> bool:
    """Admissibility of a relative module specifier such as ``./utils``.

    The specifier and its last path segment both have to pass the standard
    rules, and hidden entries (``./.cache``) are rejected.
    """
    basename = candidate.rstrip("/").rsplit("/", 1)[-1]
    if basename.startswith("."):
        return False
    return is_admissible(candidate, requested) and is_admissible(basename, "")


def is_dotted_module_candidate(candidate: str, requested: str) -> bool:
    """Admissibility of a dotted module name such as ``email.parser``.

    Like is_module_candidate, the last segment is checked on its own, so
    private submodules (``email._parseaddr``) are never suggested.
    """
    last_segment = candidate.rsplit(".", 1)[-1]
    return is_admissible(candidate, requested) and is_admissible(last_segment, "")

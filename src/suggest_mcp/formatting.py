"""Validation outcomes and human-readable diagnostics."""

from collections.abc import Sequence
from typing import Any, assert_never

from .models import DiagnosticKind, Invalid, Suggestion, Valid, ValidationOutcome

_HEADERS = {
    DiagnosticKind.MEMBER: 'Property "{target}" does not exist on "{owner}".',
    DiagnosticKind.IMPORT: 'Import "{target}" is not defined in module "{owner}".',
    DiagnosticKind.EXPORT: 'Export "{target}" is not defined in module "{owner}".',
    DiagnosticKind.MODULE_PATH: 'Cannot find module "{target}".',
    DiagnosticKind.MODULE_NAME: 'No module named "{target}".',
}


def to_validation_outcome(
    query: str, suggestions: Sequence[Suggestion], context_ref: Any = None
) -> ValidationOutcome:
    """Wrap a ranking into a validation outcome.

    An empty ranking is ``Valid``: when nothing clears the threshold the
    diagnostic is suppressed entirely.
    """
    if not suggestions:
        return Valid()
    return Invalid(target=query, suggestions=tuple(suggestions), context_ref=context_ref)


def _format_suggestion(suggestion: Suggestion) -> str:
    if suggestion.signature is not None:
        return f"{suggestion.name}: {suggestion.signature}"
    return f"{suggestion.name} ({suggestion.score * 100:.0f}%)"


def format_message(outcome: ValidationOutcome) -> str:
    """One line per suggestion in ranked order, or "" for a valid outcome."""
    match outcome:
        case Valid():
            return ""
        case Invalid():
            return "\n".join(_format_suggestion(s) for s in outcome.suggestions)
        case _:
            assert_never(outcome)


def format_diagnostic(
    outcome: ValidationOutcome, kind: DiagnosticKind | str, owner: str = ""
) -> str:
    """Full diagnostic text for an outcome.

    Args:
        outcome: Result of a lookup.
        kind: What the looked-up name is (member, import, ...).
        owner: The object or module the name was looked up in, if any.

    Returns:
        "" for a valid outcome, otherwise a header line followed by
        ``Did you mean:`` and the formatted suggestions.
    """
    match outcome:
        case Valid():
            return ""
        case Invalid():
            header = _HEADERS[DiagnosticKind(kind)].format(
                target=outcome.target, owner=owner
            )
            return f"{header} Did you mean:\n{format_message(outcome)}"
        case _:
            assert_never(outcome)

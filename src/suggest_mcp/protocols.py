"""Protocol definitions for dependency injection and interface contracts."""

from typing import Protocol


class CandidateProvider(Protocol):
    """Protocol for sources of candidate names."""

    def has_name(self, name: str) -> bool:
        """Check whether ``name`` exists, in which case nothing is suggested.

        Raises:
            CandidateLookupError: If existence cannot be determined.
        """
        ...

    def get_candidates(self) -> list[str]:
        """List every name that could be suggested.

        Raises:
            CandidateLookupError: If the candidate source is unavailable.
        """
        ...

    def get_signature(self, name: str) -> str | None:
        """Get a display signature for a candidate, or None if it has none."""
        ...

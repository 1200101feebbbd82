"""suggest-mcp custom exceptions.

Exception Design Principles:
1. The ranking engine is total and never raises; these exceptions belong to
   the collaborator layer (configuration, candidate providers, server)
2. Handle exceptions as late as possible (preserve details until domain context is available)
3. Split on domain of actionable information:
   - Recoverable by user reconfiguration outside session (ConfigError)
   - Downgraded to "no candidates" by the suggestion service (CandidateLookupError)
"""


class SuggestMCPError(Exception):
    """Base exception for all suggest-mcp errors.

    Provides rich context and actionable suggestions beyond standard exceptions.
    All suggest-mcp custom exceptions inherit from this base class.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] = None,  # detailed list of errors (if available)
        suggestions: list[str] = None,  # remedial actions
        context: dict = None,  # additional detailed context
    ):
        """Initialize SuggestMCPError.

        Args:
            message: Primary error message for users
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class ConfigError(SuggestMCPError):
    """Application configuration errors - recoverable by user reconfiguration.

    Covers setup issues that prevent the suggestion service from starting but
    can be resolved by user action outside the current session:
    - A project root that does not exist or is not a directory

    Malformed settings values are rejected earlier by pydantic validation and
    surface as pydantic.ValidationError, not ConfigError.
    """

    pass


class CandidateLookupError(SuggestMCPError):
    """A candidate provider could not enumerate names.

    Raised by providers when the information needed to build a candidate list
    is unavailable:
    - A dotted object path that cannot be imported or walked
    - A module that fails to import
    - A directory that cannot be read

    The suggestion service downgrades these to an empty candidate list, which
    yields a Valid outcome: no report is better than a possibly-wrong one.
    """

    pass

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import SuggestMCPError

# =============================================================================
# UNIFIED RESPONSE MODEL
# =============================================================================
# Single response type for all server tools


class Response(BaseModel):
    """Unified response type for all MCP tools."""

    status: Literal["success", "error"] = Field(
        ..., description="Response status indicating outcome"
    )
    message: str = Field(..., description="Human-readable summary of the response")
    data: Any | None = Field(
        None,
        description="Response payload - can be dict, pydantic model, or any serializable type",
    )
    errors: list[str] = Field(
        default_factory=list, description="List of error messages"
    )
    suggestions: list[str] = Field(
        default_factory=list, description="Actionable suggestions for the user"
    )
    metadata: dict[str, Any] | None = Field(
        None, description="Additional context and domain-specific information"
    )

    @classmethod
    def from_error(cls, error: Exception) -> "Response":
        """Create Response from any Exception, with potentially helpful info for recovery.

        Args:
            error: Any Exception instance

        Returns:
            Response object with error details
        """
        if isinstance(error, SuggestMCPError):
            # Use rich context from SuggestMCPError
            return cls(
                status="error",
                message=error.message,
                errors=error.errors,
                suggestions=error.suggestions,
                metadata={**error.context, "exception_type": type(error).__name__},
            )
        elif isinstance(error, ValidationError):
            # Bad tool arguments, e.g. an out-of-range threshold
            return cls(
                status="error",
                message=f"Invalid arguments: {error.error_count()} validation errors",
                errors=[e["msg"] for e in error.errors()],
                suggestions=["Check the argument types and ranges and try again"],
                metadata={"exception_type": type(error).__name__},
            )
        else:
            # Generic exception handling
            return cls(
                status="error",
                message=f"Unexpected error: {str(error)}",
                errors=[str(error)],
                suggestions=[
                    "Check server logs for detailed information",
                    "Try again - this may be a temporary issue",
                ],
                metadata={"exception_type": type(error).__name__},
            )


# =============================================================================
# SCORING MODELS
# =============================================================================
# Values produced by the ranking engine. All of them are immutable and created
# fresh for each query.


class SimilarityScore(float):
    """A similarity value clamped into the closed interval [0, 1].

    The constructor is the only place the bound is enforced; afterwards the
    value behaves as a plain float. NaN clamps to 0.
    """

    __slots__ = ()

    def __new__(cls, value: float = 0.0) -> "SimilarityScore":
        value = float(value)
        if not value >= 0.0:
            value = 0.0
        elif value > 1.0:
            value = 1.0
        return super().__new__(cls, value)


class CandidateMode(StrEnum):
    """Admissibility rule set applied to candidate names."""

    STANDARD = "standard"  # members and imports
    EXPORT = "export"


class DiagnosticKind(StrEnum):
    """What kind of name a diagnostic is about."""

    MEMBER = "member"
    IMPORT = "import"
    EXPORT = "export"
    MODULE_PATH = "module_path"
    MODULE_NAME = "module_name"


class Suggestion(BaseModel):
    """A ranked correction candidate."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Suggested name")
    score: float = Field(..., description="Composite similarity score in [0, 1]")
    signature: str | None = Field(
        None, description="Call signature supplied by the candidate provider"
    )

    @field_validator("score")
    @classmethod
    def _bound_score(cls, value: float) -> SimilarityScore:
        return SimilarityScore(value)


# =============================================================================
# VALIDATION OUTCOME
# =============================================================================
# Closed union: a name is either Valid, or Invalid with at least one suggestion.


class Valid(BaseModel):
    """The name exists, or nothing plausible could be suggested for it."""

    model_config = ConfigDict(frozen=True)

    status: Literal["valid"] = "valid"


class Invalid(BaseModel):
    """The name looks like a typo of one of the ranked suggestions."""

    model_config = ConfigDict(frozen=True)

    status: Literal["invalid"] = "invalid"
    target: str = Field(..., description="The name that was looked up")
    suggestions: tuple[Suggestion, ...] = Field(
        ..., description="Ranked suggestions, best first"
    )
    context_ref: Any = Field(
        None, description="Opaque caller context echoed back unchanged"
    )


ValidationOutcome = Valid | Invalid

"""suggest-mcp Package

Typo diagnosis for source-code identifiers: ranks plausible corrections for
misspelled members, imports, exports and module paths, and serves them as a
Model Context Protocol (MCP) server to reduce name hallucinations.
"""

from .candidates import is_admissible
from .config import Config, get_config
from .consts import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE, PACKAGE_VERSION
from .exceptions import CandidateLookupError, ConfigError, SuggestMCPError
from .formatting import format_message, to_validation_outcome
from .models import (
    CandidateMode,
    Invalid,
    SimilarityScore,
    Suggestion,
    Valid,
    ValidationOutcome,
)
from .ranking import module_path_min_score, rank
from .service import SuggestionService, get_suggestion_service
from .similarity import composite_score, jaro, jaro_winkler

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "MAX_SUGGESTIONS",
    "MIN_SIMILARITY_SCORE",
    "get_config",
    "get_suggestion_service",
    "rank",
    "is_admissible",
    "module_path_min_score",
    "composite_score",
    "jaro",
    "jaro_winkler",
    "to_validation_outcome",
    "format_message",
    "Config",
    "SuggestionService",
    "CandidateMode",
    "SimilarityScore",
    "Suggestion",
    "Valid",
    "Invalid",
    "ValidationOutcome",
    "SuggestMCPError",
    "ConfigError",
    "CandidateLookupError",
]

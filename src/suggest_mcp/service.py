"""Suggestion service: existence checks, ranking and outcome assembly."""

import logging
from collections import OrderedDict
from collections.abc import Iterable
from functools import cache
from pathlib import Path
from typing import Any

from .config import Config, get_config
from .consts import RANKING_CACHE_SIZE
from .exceptions import CandidateLookupError, ConfigError
from .formatting import to_validation_outcome
from .models import CandidateMode, DiagnosticKind, Suggestion, Valid, ValidationOutcome
from .protocols import CandidateProvider
from .providers import (
    ExportProvider,
    MemberProvider,
    ModuleNameProvider,
    ModulePathProvider,
)
from .ranking import Threshold, module_path_min_score, rank, ranking_cache_key

logger = logging.getLogger("suggest-mcp.service")


class SuggestionService:
    """Validate names against candidate providers and suggest corrections.

    Requires a config instance.
    """

    def __init__(self, config: Config):
        """Initialize SuggestionService.

        Args:
            config: Config instance.

        Raises:
            ConfigError: If config.project_root is not a directory.
        """
        root = Path(config.project_root).expanduser()
        if not root.is_dir():
            raise ConfigError(
                f"Project root '{config.project_root}' is not a directory",
                errors=[f"No such directory: {root}"],
                suggestions=["Set SUGGESTMCP_PROJECT_ROOT to an existing directory"],
                context={"project_root": config.project_root},
            )
        self.config = config
        self.project_root = root
        self._cache: OrderedDict[tuple, list[Suggestion]] = OrderedDict()

    def rank_candidates(
        self,
        query: str,
        candidates: Iterable[str],
        min_score: Threshold | None = None,
        mode: CandidateMode | str = CandidateMode.STANDARD,
    ) -> list[Suggestion]:
        """Rank candidates for a query, memoizing recent identical requests.

        Args:
            query: The misspelled name.
            candidates: Names that actually exist.
            min_score: Threshold or threshold function; config.min_score if None.
            mode: Admissibility rule set.

        Returns:
            Ranked suggestions without signatures.
        """
        candidates = list(candidates)
        threshold = self.config.min_score if min_score is None else min_score
        mode = CandidateMode(mode)
        cache_key = (*ranking_cache_key(query, candidates), mode, threshold)

        if cache_key in self._cache:
            logger.debug(f"Using cached ranking for '{query}'")
            self._cache.move_to_end(cache_key)
            return list(self._cache[cache_key])

        suggestions = rank(query, candidates, threshold, mode)
        logger.debug(
            f"Ranked {len(candidates)} candidates for '{query}': "
            f"{len(suggestions)} above threshold"
        )
        self._cache[cache_key] = suggestions
        if len(self._cache) > RANKING_CACHE_SIZE:
            # least recently used first
            self._cache.popitem(last=False)
        return list(suggestions)

    def validate_member(
        self, target: Any, name: str, owner: str | None = None
    ) -> ValidationOutcome:
        """Validate attribute access ``target.name``.

        Args:
            target: Object the attribute is looked up on.
            name: Attribute name.
            owner: Display name of the target; defaults to its type name.

        Returns:
            Valid, or Invalid with member suggestions.
        """
        owner = owner or type(target).__name__
        return self._validate(
            name,
            MemberProvider(target),
            mode=CandidateMode.STANDARD,
            min_score=self.config.min_score,
            context={"kind": DiagnosticKind.MEMBER.value, "owner": owner},
        )

    def validate_import(self, module_name: str, name: str) -> ValidationOutcome:
        """Validate ``from module_name import name``."""
        return self._validate(
            name,
            ExportProvider(module_name),
            mode=CandidateMode.STANDARD,
            min_score=self.config.min_score,
            context={"kind": DiagnosticKind.IMPORT.value, "owner": module_name},
        )

    def validate_export(self, module_name: str, name: str) -> ValidationOutcome:
        """Validate that ``module_name`` exports ``name``.

        Unlike imports, reserved ``__internal`` names and ``default`` are never
        suggested.
        """
        return self._validate(
            name,
            ExportProvider(module_name),
            mode=CandidateMode.EXPORT,
            min_score=self.config.min_score,
            context={"kind": DiagnosticKind.EXPORT.value, "owner": module_name},
        )

    def validate_module_path(
        self, requested_path: str, containing_file: str
    ) -> ValidationOutcome:
        """Validate a relative module path requested from ``containing_file``.

        Relative containing-file paths are resolved against config.project_root.
        """
        containing = Path(containing_file)
        if not containing.is_absolute():
            containing = self.project_root / containing
        return self._validate(
            requested_path.replace("\\", "/"),
            ModulePathProvider(requested_path, containing),
            mode=CandidateMode.STANDARD,
            min_score=module_path_min_score,
            context={
                "kind": DiagnosticKind.MODULE_PATH.value,
                "owner": str(containing),
            },
        )

    def validate_module_name(self, module_name: str) -> ValidationOutcome:
        """Validate a dotted module name such as ``json.decoder``."""
        return self._validate(
            module_name,
            ModuleNameProvider(module_name),
            mode=CandidateMode.STANDARD,
            min_score=module_path_min_score,
            context={"kind": DiagnosticKind.MODULE_NAME.value, "owner": ""},
        )

    def _validate(
        self,
        name: str,
        provider: CandidateProvider,
        *,
        mode: CandidateMode,
        min_score: Threshold,
        context: dict,
    ) -> ValidationOutcome:
        logger.debug(f"Validating {context['kind']} '{name}'")

        try:
            if provider.has_name(name):
                return Valid()
            candidates = provider.get_candidates()
        except CandidateLookupError as e:
            logger.warning(f"Candidate lookup failed for '{name}': {e.message}")
            return Valid()

        suggestions = self.rank_candidates(name, candidates, min_score, mode)
        if self.config.include_signatures:
            # signatures are looked up after ranking and never affect order
            suggestions = [self._with_signature(s, provider) for s in suggestions]

        outcome = to_validation_outcome(name, suggestions, context)
        logger.info(
            f"{context['kind']} '{name}': {len(suggestions)} suggestions"
        )
        return outcome

    @staticmethod
    def _with_signature(
        suggestion: Suggestion, provider: CandidateProvider
    ) -> Suggestion:
        signature = provider.get_signature(suggestion.name)
        if signature is None:
            return suggestion
        return suggestion.model_copy(update={"signature": signature})

    def clear_cache(self):
        """Clear memoized rankings. Useful for testing.

        Raises:
            No exceptions raised.
        """
        self._cache.clear()


@cache
def get_suggestion_service() -> SuggestionService:
    """Get a cached SuggestionService instance.

    Raises:
        ConfigError: If the configured project root is not a directory.
    """
    return SuggestionService(get_config())

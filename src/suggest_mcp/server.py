"""suggest-mcp server implementation."""

import logging

from mcp.server.fastmcp import FastMCP

from .config import get_config, setup_logging
from .consts import SERVER_NAME
from .formatting import format_diagnostic
from .models import CandidateMode, DiagnosticKind, Invalid, Response, ValidationOutcome
from .providers import resolve_object
from .ranking import module_path_min_score
from .service import get_suggestion_service

logger = logging.getLogger("suggest-mcp.server")

mcp = FastMCP(
    name=SERVER_NAME,
    instructions="""
    suggest-mcp server.

    This MCP server allows you to:
    1. Check whether a member, import, export or module name exists.
    2. Get ranked corrections for names that look like typos.
    """,
    log_level=get_config().log_level,
)


def _outcome_response(
    outcome: ValidationOutcome, kind: DiagnosticKind, name: str, owner: str = ""
) -> Response:
    """Build the tool response for a validation outcome."""
    if isinstance(outcome, Invalid):
        return Response(
            status="success",
            message=format_diagnostic(outcome, kind, owner),
            data=outcome.model_dump(mode="json"),
            suggestions=[f"Try '{s.name}' instead" for s in outcome.suggestions],
            metadata={"name": name, "valid": False, "kind": kind.value},
        )
    return Response(
        status="success",
        message=f"No correction needed for '{name}'",
        data=outcome.model_dump(mode="json"),
        metadata={"name": name, "valid": True, "kind": kind.value},
    )


@mcp.tool()
async def suggest_members(target: str, name: str) -> Response:
    """Check an attribute name on a Python object and suggest corrections.

    Args:
        target: Dotted path of the object (e.g. 'os.path', 'collections.Counter')
        name: Attribute name to check (e.g. 'joinn')

    Returns:
        valid=True when the attribute exists or nothing similar was found,
        otherwise ranked suggestions with call signatures where available.
    """
    logger.info(f"Suggesting members for {target}.{name}")

    try:
        obj = resolve_object(target)
        outcome = get_suggestion_service().validate_member(obj, name, owner=target)
        return _outcome_response(outcome, DiagnosticKind.MEMBER, name, target)
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def suggest_imports(module: str, name: str) -> Response:
    """Check a `from module import name` statement and suggest corrections.

    Args:
        module: Importable module name (e.g. 'json')
        name: Imported name to check (e.g. 'dumsp')
    """
    logger.info(f"Suggesting imports for from {module} import {name}")

    try:
        outcome = get_suggestion_service().validate_import(module, name)
        return _outcome_response(outcome, DiagnosticKind.IMPORT, name, module)
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def suggest_exports(module: str, name: str) -> Response:
    """Check a name a module is expected to export and suggest corrections.

    Private, reserved (`__name`) and `default` exports are never suggested.

    Args:
        module: Importable module name
        name: Exported name to check
    """
    logger.info(f"Suggesting exports for {module}.{name}")

    try:
        outcome = get_suggestion_service().validate_export(module, name)
        return _outcome_response(outcome, DiagnosticKind.EXPORT, name, module)
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def suggest_module_paths(requested_path: str, containing_file: str) -> Response:
    """Check a relative module path and suggest sibling modules.

    Args:
        requested_path: Path as written in the source (e.g. './utlis')
        containing_file: File containing the reference; relative paths are
            resolved against the configured project root
    """
    logger.info(f"Suggesting module paths for {requested_path} from {containing_file}")

    try:
        outcome = get_suggestion_service().validate_module_path(
            requested_path, containing_file
        )
        return _outcome_response(
            outcome, DiagnosticKind.MODULE_PATH, requested_path, containing_file
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def suggest_module_names(module: str) -> Response:
    """Check a dotted module name and suggest installed modules.

    Args:
        module: Dotted module name (e.g. 'colections', 'json.decodr')
    """
    logger.info(f"Suggesting module names for {module}")

    try:
        outcome = get_suggestion_service().validate_module_name(module)
        return _outcome_response(outcome, DiagnosticKind.MODULE_NAME, module)
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def rank_names(
    query: str,
    candidates: list[str],
    min_score: float | None = None,
    mode: str = "standard",
    adaptive: bool = False,
) -> Response:
    """Rank arbitrary candidate names as corrections of a query.

    Args:
        query: The misspelled name
        candidates: Names that actually exist
        min_score: Minimum similarity (0.0 to 1.0), defaults to server config
        mode: 'standard' or 'export' admissibility rules
        adaptive: Use the module path threshold (0.33 for long queries, 0.35 otherwise)
            instead of min_score
    """
    logger.info(f"Ranking {len(candidates)} candidates for {query}")

    try:
        threshold = module_path_min_score if adaptive else min_score
        suggestions = get_suggestion_service().rank_candidates(
            query, candidates, threshold, CandidateMode(mode)
        )
        return Response(
            status="success",
            message=f"{len(suggestions)} suggestions for '{query}'",
            data=[s.model_dump(mode="json") for s in suggestions],
            metadata={"query": query, "candidate_count": len(candidates)},
        )
    except Exception as e:
        return Response.from_error(e)


def main() -> None:
    """Run the MCP server."""
    setup_logging(get_config().log_level)
    logger.info(f"Starting {SERVER_NAME} over stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

"""Tests for the MCP tool functions."""

from unittest.mock import patch

import pytest

from suggest_mcp import server


@pytest.fixture
def patched_service(service):
    """Point the server tools at the test service"""
    with patch("suggest_mcp.server.get_suggestion_service", return_value=service):
        yield service


@pytest.mark.asyncio
async def test_suggest_members_typo(patched_service):
    """Test a member typo returns a diagnostic and suggestions"""
    response = await server.suggest_members("os.path", "joinn")

    assert response.status == "success"
    assert response.metadata == {"name": "joinn", "valid": False, "kind": "member"}
    assert response.message.startswith(
        'Property "joinn" does not exist on "os.path". Did you mean:\n'
    )
    assert response.data["status"] == "invalid"
    assert "Try 'join' instead" in response.suggestions


@pytest.mark.asyncio
async def test_suggest_members_valid(patched_service):
    """Test an existing member needs no correction"""
    response = await server.suggest_members("os.path", "join")

    assert response.status == "success"
    assert response.metadata["valid"] is True
    assert response.data == {"status": "valid"}
    assert response.suggestions == []


@pytest.mark.asyncio
async def test_suggest_members_bad_target(patched_service):
    """Test an unresolvable target is reported as an error"""
    response = await server.suggest_members("no_such_module_xyz", "thing")

    assert response.status == "error"
    assert response.metadata["exception_type"] == "CandidateLookupError"


@pytest.mark.asyncio
async def test_suggest_imports(patched_service):
    """Test import typos name the module in the diagnostic"""
    response = await server.suggest_imports("json", "dumsp")

    assert response.metadata["valid"] is False
    assert response.message.startswith('Import "dumsp" is not defined in module "json".')
    assert "dumps" in [s["name"] for s in response.data["suggestions"]]


@pytest.mark.asyncio
async def test_suggest_exports_never_private(patched_service):
    """Test export suggestions exclude reserved names"""
    response = await server.suggest_exports("json", "JSONDecodr")

    assert response.metadata["valid"] is False
    names = [s["name"] for s in response.data["suggestions"]]
    assert "JSONDecoder" in names
    assert not any(name.startswith("_") for name in names)


@pytest.mark.asyncio
async def test_suggest_module_paths(patched_service):
    """Test relative module path typos"""
    response = await server.suggest_module_paths("./utlis", "app/main.py")

    assert response.metadata["valid"] is False
    assert response.message.startswith('Cannot find module "./utlis". Did you mean:\n./utils')


@pytest.mark.asyncio
async def test_suggest_module_names(patched_service):
    """Test module name lookups"""
    valid = await server.suggest_module_names("json")
    assert valid.metadata["valid"] is True
    assert valid.message == "No correction needed for 'json'"

    invalid = await server.suggest_module_names("colections")
    assert invalid.metadata["valid"] is False
    assert invalid.message.startswith('No module named "colections".')


@pytest.mark.asyncio
async def test_rank_names(patched_service):
    """Test ranking arbitrary candidates"""
    response = await server.rank_names(
        "readFil", ["readFile", "readFileSync", "writeFile"]
    )

    assert response.status == "success"
    assert response.data[0]["name"] == "readFile"
    assert response.metadata == {"query": "readFil", "candidate_count": 3}


@pytest.mark.asyncio
async def test_rank_names_adaptive(patched_service):
    """Test the adaptive module path threshold"""
    response = await server.rank_names("./utlis", ["./utils", "./zzz"], adaptive=True)

    assert [s["name"] for s in response.data] == ["./utils"]


@pytest.mark.asyncio
async def test_rank_names_bad_mode(patched_service):
    """Test an unknown mode becomes an error response"""
    response = await server.rank_names("readFil", ["readFile"], mode="members")

    assert response.status == "error"
    assert response.metadata["exception_type"] == "ValueError"


@pytest.mark.asyncio
async def test_suggest_imports_module_failing_on_import(patched_service, broken_modules):
    """Test a module raising at import time needs no correction"""
    response = await server.suggest_imports("broken_at_import", "thing")

    assert response.status == "success"
    assert response.metadata["valid"] is True

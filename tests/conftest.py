"""Pytest configuration and shared fixtures"""

import os

import pytest

from suggest_mcp.config import Config
from suggest_mcp.service import SuggestionService

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears SUGGESTMCP_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    """
    # Find all SUGGESTMCP_* environment variables
    suggestmcp_vars = {
        key: value
        for key, value in os.environ.items()
        if key.startswith("SUGGESTMCP_")
    }

    # Temporarily remove them
    for key in suggestmcp_vars:
        os.environ.pop(key, None)

    try:
        yield
    finally:
        # Restore original environment variables
        for key, value in suggestmcp_vars.items():
            os.environ[key] = value


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment.

    This ensures tests can verify default values without environment
    variable interference.
    """
    return Config()


@pytest.fixture
def module_tree(tmp_path):
    """A small project layout for module path lookups.

    project/
        app/
            main.py
            utils.py
            helpers.pyi
            _private.py
            .cache.py
            notes.txt
            models/
                __init__.py
                user.py
    """
    app = tmp_path / "app"
    models = app / "models"
    models.mkdir(parents=True)

    for path in [
        app / "main.py",
        app / "utils.py",
        app / "helpers.pyi",
        app / "_private.py",
        app / ".cache.py",
        app / "notes.txt",
        models / "__init__.py",
        models / "user.py",
    ]:
        path.write_text("")

    return tmp_path


@pytest.fixture
def config(module_tree):
    """Config rooted at the temporary module tree"""
    return Config(project_root=str(module_tree), log_level="DEBUG")


@pytest.fixture
def service(config):
    """SuggestionService fixture with a clean ranking cache"""
    service = SuggestionService(config)
    service.clear_cache()  # Ensure clean state
    return service


@pytest.fixture
def broken_modules(tmp_path, monkeypatch):
    """Importable names whose import raises something other than ImportError.

    broken_at_import.py      raises RuntimeError
    broken_pkg/__init__.py   raises ZeroDivisionError
    """
    site = tmp_path / "site"
    (site / "broken_pkg").mkdir(parents=True)
    (site / "broken_at_import.py").write_text("raise RuntimeError('boom at import')\n")
    (site / "broken_pkg" / "__init__.py").write_text("1 / 0\n")
    monkeypatch.syspath_prepend(str(site))
    return site
